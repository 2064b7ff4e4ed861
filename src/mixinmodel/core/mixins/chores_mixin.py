import logging

logger = logging.getLogger(__name__)


class ChoresMixin:
    """Mixin with a single chore that reports itself on the log."""

    def doe_dingen(self) -> None:
        """Do things (log only)."""
        who = getattr(self, 'name', None) or self.__class__.__name__
        logger.info(f"{who} is doing things")


__all__ = ["ChoresMixin"]
