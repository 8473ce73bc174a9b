"""Parse radiotap capture headers and check MACs against known 802.11 vendor prefixes."""

__version__ = "0.1.0"
__all__ = [
    "radiotap",
    "radiotap_defs",
    "radiotap_dump",
    "radiotap_legacy",
    "vendors",
]