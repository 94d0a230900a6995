"""RPC-style command endpoints invoked by the GUI shell."""

# Order matches the shell's handler registration.
COMMAND_NAMES = [
    "ping",
    "get_app_info",
    "get_categories",
    "create_category",
    "update_category",
    "delete_category",
    "reorder_categories",
    "get_items",
    "get_all_items",
    "create_item",
    "update_item",
    "delete_item",
    "reorder_items",
]
