from .json_export import export_json
from .preview import create_html_preview, create_png_preview
from .report import generate_readability_report, print_color_set

__all__ = [
    "export_json",
    "create_html_preview",
    "create_png_preview",
    "generate_readability_report",
    "print_color_set",
]
