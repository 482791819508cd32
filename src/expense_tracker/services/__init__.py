__all__ = [
    "get_item",
    "set_item",
    "remove_item",
    "build_record_create",
    "append_record",
    "list_records",
    "list_records_sorted",
    "delete_record",
    "get_total",
    "get_balance",
    "merge_transactions",
    "format_signed_amount",
    "group_by_day",
]

from expense_tracker.services.storage_service import (
    get_item,
    set_item,
    remove_item
)

from expense_tracker.services.record_service import (
    build_record_create,
    append_record,
    list_records,
    list_records_sorted,
    delete_record,
    get_total,
    get_balance
)

from expense_tracker.services.transaction_service import (
    merge_transactions,
    format_signed_amount,
    group_by_day
)
