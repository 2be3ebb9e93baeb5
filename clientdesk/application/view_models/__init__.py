from .clients_table_view_model import (
    ClientSelection, filter_and_sort, paginate, build_client_table_page
)

__all__ = [
    "ClientSelection",
    "filter_and_sort",
    "paginate",
    "build_client_table_page",
]
