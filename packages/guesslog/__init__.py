from .paths import default_log_dir, default_log_path
from .store import ensure_log, read_guesses, append_guess
from .report import format_history, format_candidates, write_csv, write_manifest, DISPLAY_LIMIT

__all__ = ["default_log_dir", "default_log_path", "ensure_log", "read_guesses", "append_guess",
           "format_history", "format_candidates", "write_csv", "write_manifest", "DISPLAY_LIMIT"]
