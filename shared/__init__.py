"""
Shared module for infrastructure used by the search API.

STRUCTURE:
- shared.config: Configuration
  - settings.py: Environment config (Pydantic)
  - logging.py: Structured logging
  - constants.py: Limits, sample data constants

- shared.infrastructure: Database
  - db.py: SQLAlchemy engine, sessions, safe_commit()

- shared.utils: Utilities
  - exceptions.py: HTTP exceptions with auto-logging
  - schemas.py: Projection DTOs and response schemas (Pydantic)

IMPORT EXAMPLES:
    from shared.infrastructure.db import get_db, safe_commit
    from shared.config.settings import settings
    from shared.config.constants import Limits
    from shared.utils.exceptions import NotFoundError
    from shared.utils.schemas import MemberTeamDto
"""
