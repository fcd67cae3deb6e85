"""ValidatorPort interface"""

from abc import ABC, abstractmethod
from typing import Any

from .models import CheckResult, EntityType, ValidationContext


class ValidatorPort(ABC):
    """Port interface for validation engines.

    Keeps the rule evaluation independent of how entities are loaded and how
    results are persisted.
    """

    @abstractmethod
    def validate(
        self,
        entity_type: EntityType,
        entity: Any,
        context: ValidationContext
    ) -> list[CheckResult]:
        """Run every check registered for entity_type against entity.

        Args:
            entity_type: Which rule set to run
            entity: Order, design job or line item (DB model or any object
                exposing the same attributes)
            context: Clock and related rows needed by the checks

        Returns:
            One CheckResult per registered check, in registration order
        """
        pass
