import re
from typing import TypeVar

from sqlalchemy import Select

from ..schemas.pagination import Pagination, PaginationQuery

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

SelectT = TypeVar("SelectT", bound=Select)

_DECIMAL = re.compile(r"([+-]?)([0-9]+)")

# largest OFFSET a signed 64-bit database integer can hold
MAX_OFFSET = 2**63 - 1
_MAX_DIGITS = len(str(MAX_OFFSET))


def _positive_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    match = _DECIMAL.fullmatch(raw.strip())
    if not match:
        return None
    sign, digits = match.group(1), match.group(2).lstrip("0")
    if not digits or sign == "-":
        return None
    if len(digits) > _MAX_DIGITS:
        # too long to be a 64-bit value; sized without converting the whole string
        return MAX_OFFSET + 1
    return int(digits)


def parse_pagination_query(
    raw_page: str | None = None, raw_page_size: str | None = None
) -> PaginationQuery:
    """Normalize raw ``page``/``page_size`` query values.

    Malformed, missing or non-positive values fall back to the defaults and
    oversized page sizes are clamped to ``MAX_PAGE_SIZE``. A page whose offset
    would not fit in ``MAX_OFFSET`` is treated as unparsable. Never raises.
    """
    page_size = min(_positive_int(raw_page_size) or DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE)
    page = _positive_int(raw_page) or DEFAULT_PAGE
    if (page - 1) * page_size > MAX_OFFSET:
        page = DEFAULT_PAGE
    return PaginationQuery(page=page, page_size=page_size)


def offset_limit(pagination: PaginationQuery) -> tuple[int, int]:
    return (pagination.page - 1) * pagination.page_size, pagination.page_size


def paginate(stmt: SelectT, pagination: PaginationQuery) -> SelectT:
    offset, limit = offset_limit(pagination)
    return stmt.offset(offset).limit(limit)


def create_pagination_response(total_records: int, pagination: PaginationQuery) -> Pagination:
    # ceiling division; an empty result set has zero pages
    total_pages = -(-total_records // pagination.page_size)
    return Pagination(
        total_records=total_records,
        total_pages=total_pages,
        page=pagination.page,
        page_size=pagination.page_size,
        has_more=pagination.page < total_pages,
    )
