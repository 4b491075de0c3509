"""Tests for the district export script."""
import importlib.util
from pathlib import Path

import pandas as pd
import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "export_district_centers.py"


@pytest.fixture
def export_script():
    spec = importlib.util.spec_from_file_location("export_district_centers", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_export_to_csv(export_script, service, india_api, tmp_path):
    output = tmp_path / "bengaluru.csv"

    code = export_script.main(
        ["--country", "India", "--state", "Karnataka", "--district", "Bengaluru", "--output", str(output)],
        service=service,
    )

    assert code == 0
    df = pd.read_csv(output)
    assert len(df) == 12
    assert df["district"].unique().tolist() == ["Bengaluru"]


def test_list_states(export_script, service, india_api, capsys):
    code = export_script.main(["--list", "--country", "India"], service=service)

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["Karnataka\t40", "Kerala\t15"]


def test_export_requires_full_selection(export_script, service, india_api, capsys):
    code = export_script.main(["--country", "India"], service=service)

    assert code == 2
    assert "required" in capsys.readouterr().err


def test_api_failure_exit_code(export_script, service, session, capsys):
    code = export_script.main(["--list"], service=service)

    assert code == 1
    assert "Error" in capsys.readouterr().err
