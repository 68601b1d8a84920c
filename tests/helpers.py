import importlib.util
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent


def load_main_module():
    """Import cmd.api.main by path to avoid conflict with stdlib cmd."""
    if "cmd.api.main" in sys.modules:
        return sys.modules["cmd.api.main"]

    file_path = project_root / "cmd" / "api" / "main.py"
    spec = importlib.util.spec_from_file_location("cmd.api.main", file_path)
    main_module = importlib.util.module_from_spec(spec)
    sys.modules["cmd.api.main"] = main_module
    spec.loader.exec_module(main_module)
    return main_module
