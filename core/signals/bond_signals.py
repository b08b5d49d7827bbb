"""Django signals for bond lifecycle events."""

from django.db.models.signals import post_save
from django.dispatch import receiver

import structlog

from core.enums import BondState

logger = structlog.get_logger(__name__)


@receiver(post_save, sender="core.Bond")
def log_bond_saved(
    sender: type,
    instance,
    created: bool,
    update_fields=None,
    **_kwargs,
) -> None:
    """Log follow events when a Bond is written.

    A new FOLLOWING bond logs ``follow_started``, a new REQUESTING bond logs
    ``follow_requested`` and a later state change to FOLLOWING logs
    ``follow_accepted``.

    Args:
        sender: The model class (Bond)
        instance: The Bond instance being saved
        created: True if this is a new bond, False if updating
        update_fields: Fields passed to ``save(update_fields=...)``, if any
    """
    del sender

    if created:
        event = (
            "follow_started"
            if instance.state == BondState.FOLLOWING.value
            else "follow_requested"
        )
    elif (
        update_fields is not None
        and "state" in update_fields
        and instance.state == BondState.FOLLOWING.value
    ):
        event = "follow_accepted"
    else:
        return

    logger.info(
        event,
        bond_id=instance.pk,
        user_id=instance.user_id,
        friend_id=instance.friend_id,
    )
