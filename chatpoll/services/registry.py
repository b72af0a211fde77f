import logging

from ..models import Room, User

logger = logging.getLogger(__name__)


# user_id / room_id are primary keys, so get_or_create is an atomic upsert: a concurrent insert of
# the same key raises IntegrityError inside get_or_create, which then re-reads the existing row.


def ensure_user(user_id: str) -> User | None:
    if not user_id:
        return None
    user, created = User.objects.get_or_create(user_id=user_id)
    if created:
        logger.info(f"Registered new user {user_id}")
    return user


def ensure_room(room_id: str) -> Room | None:
    if not room_id:
        return None
    room, created = Room.objects.get_or_create(room_id=room_id)
    if created:
        logger.info(f"Registered new room {room_id}")
    return room
