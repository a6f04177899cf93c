# Services package init
"""
Irenet Backend — Services Layer
===============================

What:  Resource logic sitting between routes (HTTP) and the database.
How:   Each service is a stateless object receiving the request's
       AsyncSession on every call; a module-level singleton is imported by
       the routes.

Service Inventory:
    - UserService:         list / get / create users
    - OrganizationService: list (joined with owner) / create
    - DonationService:     list / list by status / create / update status
    - RequestService:      mirrors DonationService for organization requests
    - MatchService:        list (denormalized) / create (three writes, one transaction)

Every service raises ValidationError for missing fields before touching
storage, and wraps SQLAlchemy failures in DatabaseError.
"""
