# imt_fitness/utils/decorators.py
from functools import wraps

from flask_jwt_extended import current_user, jwt_required

from imt_fitness.errors import AuthError, ForbiddenError


def role_required(*roles):
    """Require a valid token whose user holds one of ``roles``.

    The authenticated user is passed to the view as ``current_user``.
    """
    allowed = {getattr(role, "value", role) for role in roles}

    def decorator(view_func):
        @wraps(view_func)
        @jwt_required()
        def wrapper(*args, **kwargs):
            user = current_user
            if user is None:
                raise AuthError("User not found")
            if allowed and user.role not in allowed:
                raise ForbiddenError("You do not have access to this resource")
            kwargs['current_user'] = user
            return view_func(*args, **kwargs)
        return wrapper
    return decorator
