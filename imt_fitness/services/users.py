import logging

from flask_jwt_extended import create_access_token
from sqlalchemy import desc

from imt_fitness.errors import AuthError, NotFoundError, ValidationError
from imt_fitness.models import Message, Role, User, Video

logger = logging.getLogger(__name__)


def get_user_or_404(session, user_id, role=None) -> User:
    user = session.get(User, user_id)
    if user is None or (role is not None and user.role != role):
        label = role.value.lower() if role is not None else "user"
        raise NotFoundError(f"{label.capitalize()} not found")
    return user


def coach_client_or_404(session, coach: User, client_id) -> User:
    """A coach may only reach clients assigned to them."""
    client = session.get(User, client_id)
    if client is None or client.role != Role.CLIENT or client.coach_id != coach.id:
        raise NotFoundError("Client not found")
    return client


def _ensure_unique(session, phone=None, email=None, exclude_id=None):
    if phone:
        query = session.query(User).filter(User.phone == phone)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        if query.first():
            raise ValidationError("Phone number is already registered")
    if email:
        query = session.query(User).filter(User.email == email)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        if query.first():
            raise ValidationError("Email is already registered")


def _resolve_coach(session, coach_id):
    if coach_id in (None, ""):
        return None
    try:
        coach_id = int(coach_id)
    except (TypeError, ValueError):
        raise ValidationError("Invalid coach id")
    return get_user_or_404(session, coach_id, role=Role.COACH)


def create_user(session, name, phone, password, role=Role.CLIENT, email=None, coach_id=None) -> User:
    role = Role(role)
    if role != Role.CLIENT and coach_id:
        raise ValidationError("Only clients can be assigned to a coach")
    _ensure_unique(session, phone=phone, email=email)
    coach = _resolve_coach(session, coach_id) if role == Role.CLIENT else None

    user = User(
        name=name,
        phone=phone,
        email=email or None,
        role=role.value,
        coach_id=coach.id if coach else None,
    )
    user.set_password(password)
    session.add(user)
    session.commit()
    logger.info(f"Created {role.value} user {user.id}")
    return user


def register(session, name, phone, password, coach_id=None, email=None) -> User:
    """Self-registration always produces a CLIENT."""
    return create_user(session, name, phone, password, role=Role.CLIENT, email=email, coach_id=coach_id)


def authenticate(session, phone, password) -> User:
    user = session.query(User).filter_by(phone=phone).first()
    if user is None or not user.check_password(password):
        logger.info(f"Login failed for {phone}")
        raise AuthError("Invalid phone number or password")
    logger.info(f"Login successful for user {user.id}")
    return user


def issue_token(user: User) -> str:
    return create_access_token(
        identity=str(user.id),
        additional_claims={"phone": user.phone, "role": user.role},
    )


def update_user(session, user: User, name=None, phone=None, email=None, password=None, **extra) -> User:
    _ensure_unique(session, phone=phone, email=email, exclude_id=user.id)
    if name:
        user.name = name
    if phone:
        user.phone = phone
    if email is not None:
        user.email = email or None
    if password:
        user.set_password(password)
    if "coach_id" in extra and user.role == Role.CLIENT:
        coach = _resolve_coach(session, extra["coach_id"])
        user.coach_id = coach.id if coach else None
    session.commit()
    return user


def assign_coach(session, client: User, coach_id) -> User:
    coach = _resolve_coach(session, coach_id)
    client.coach_id = coach.id if coach else None
    session.commit()
    return client


def delete_user(session, user: User):
    user_id, role = user.id, user.role
    if role == Role.COACH:
        session.query(User).filter(User.coach_id == user.id).update({User.coach_id: None}, synchronize_session="fetch")
    session.delete(user)
    session.commit()
    logger.info(f"Deleted {role} user {user_id}")


def list_users(session, role=None):
    query = session.query(User)
    if role is not None:
        query = query.filter(User.role == Role(role).value)
    return query.order_by(desc(User.created_at), desc(User.id)).all()


def platform_stats(session):
    return {
        "total_clients": session.query(User).filter(User.role == Role.CLIENT.value).count(),
        "total_coaches": session.query(User).filter(User.role == Role.COACH.value).count(),
        "total_videos": session.query(Video).count(),
        "total_consultations": session.query(Message).count(),
    }
