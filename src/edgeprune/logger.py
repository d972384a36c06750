"""Centralised logger config so every edgeprune module gets consistent output."""
import logging

logging.basicConfig(
    format="[%(asctime)s] %(levelname)s | %(name)s: %(message)s",
    level=logging.INFO,
)

get_logger = logging.getLogger  # convenience alias


def set_verbose(verbose: bool = True) -> None:
    """Lower the package logger to DEBUG (or restore INFO)."""
    logging.getLogger("edgeprune").setLevel(logging.DEBUG if verbose else logging.INFO)
