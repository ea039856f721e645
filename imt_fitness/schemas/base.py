from marshmallow import EXCLUDE

from imt_fitness.extensions import ma


class InputSchema(ma.Schema):
    """Request bodies ignore unknown keys instead of rejecting them."""

    class Meta:
        unknown = EXCLUDE
