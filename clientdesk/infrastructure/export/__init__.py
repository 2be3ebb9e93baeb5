from .csv_export import CSV_HEADERS, export_clients_csv, export_filename

__all__ = ["CSV_HEADERS", "export_clients_csv", "export_filename"]
