"""Input/output della traiettoria su file di testo."""

from oscsim.io.serializers import format_value, load_trajectory, save, save_trajectory

__all__ = ["format_value", "save", "save_trajectory", "load_trajectory"]
