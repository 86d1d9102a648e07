import pytest
from unittest.mock import patch

from vlint.utils.config import ConfigManager, DEFAULT_CONFIG


@pytest.fixture
def config(tmp_path):
    """ConfigManager that lives in tmp_path instead of ~/.vlint."""
    with patch.object(ConfigManager, "__init__", lambda self: None):
        mgr = ConfigManager()
    mgr.config_dir = tmp_path / ".vlint"
    mgr.config_file = mgr.config_dir / "config.json"
    mgr.config = DEFAULT_CONFIG.copy()
    mgr.config["output_dir"] = str(tmp_path / "out")
    return mgr
