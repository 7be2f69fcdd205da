from kwlist.lang.keyword import Keyword, keyword
from kwlist.lang.keyword_list import (
    EMPTY,
    KeywordList,
    delete,
    from_enum,
    from_sorted,
    get,
    has_key,
    keys,
    kl,
    merge,
    put,
    values,
)

__all__ = [
    "EMPTY",
    "Keyword",
    "KeywordList",
    "delete",
    "from_enum",
    "from_sorted",
    "get",
    "has_key",
    "keys",
    "keyword",
    "kl",
    "merge",
    "put",
    "values",
]
