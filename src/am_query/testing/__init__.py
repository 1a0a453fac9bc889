"""Testing support – record builders (strategies live in ``am_query.testing.strategies``).

The strategies module needs ``hypothesis`` and is not imported here so the
builders stay usable without the ``testing`` extra.
"""

from am_query.testing.builders import (
    EPOCH,
    AssetBuilder,
    AssignmentBuilder,
    Builder,
    ReturnRequestBuilder,
    UserBuilder,
)

__all__ = [
    "EPOCH",
    "AssetBuilder",
    "AssignmentBuilder",
    "Builder",
    "ReturnRequestBuilder",
    "UserBuilder",
]
