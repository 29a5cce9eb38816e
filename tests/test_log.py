import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

_SNIPPETS = {
    "matcher": (
        "from backlog_engine.catalog import default_catalog\n"
        "from backlog_engine.matcher import TemplateMatcher\n"
        "from backlog_engine.randomness import NumpyRandomSource\n"
        "TemplateMatcher(default_catalog(), NumpyRandomSource(1)).find_best_matching_template('zzz', 'finance')\n"
    ),
    "factory": (
        "from datetime import datetime, timezone\n"
        "from backlog_engine.catalog import default_catalog\n"
        "from backlog_engine.config import EngineConfig\n"
        "from backlog_engine.factory import TaskFactory\n"
        "from backlog_engine.randomness import NumpyRandomSource\n"
        "factory = TaskFactory(default_catalog(), NumpyRandomSource(1), lambda: datetime.now(timezone.utc), EngineConfig())\n"
        "factory.generate_initial_tasks()\n"
        "factory.create_task('legal')\n"
    ),
}


def _run(code):
    return subprocess.run(
        [sys.executable, "-c", code],
        cwd=ROOT,
        capture_output=True,
        text=True,
        check=True,
    )


@pytest.mark.parametrize("module", sorted(_SNIPPETS))
def test_library_modules_are_silent_by_default(module):
    result = _run(_SNIPPETS[module])
    assert result.stderr == ""


def test_configure_logging_enables_output():
    result = _run(
        "from backlog_engine.log import configure_logging\n"
        + "configure_logging('DEBUG')\n"
        + _SNIPPETS["matcher"]
    )
    assert "Weak match" in result.stderr
