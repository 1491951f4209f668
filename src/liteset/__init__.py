from ._exceptions import UnannotatableMemberError  # noqa: F401
from ._lite_set import (  # noqa: F401
    LiteSet,
    add_to_lite_set,
    create_lite_set,
    index_in_lite_set,
    remove_from_lite_set,
)
from ._set_ids import SetIdAllocator, default_set_ids  # noqa: F401
