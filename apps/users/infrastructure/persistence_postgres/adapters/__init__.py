"""Infrastructure adapters implementing repository and transaction ports."""

from apps.users.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)
from apps.users.infrastructure.persistence_postgres.adapters.users_repository_sqla import (
    SqlaUserRepository,
)

__all__ = ["SqlaUserRepository", "SqlaTransactionManager"]
