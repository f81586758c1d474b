import runpy
from pathlib import Path

EXAMPLE = Path(__file__).resolve().parents[1] / "examples" / "traffic.py"


def test_traffic_example_prints_sixteen_actions(capsys):
    module = runpy.run_path(str(EXAMPLE))
    module["main"]()

    lines = capsys.readouterr().out.splitlines()
    actions = [line for line in lines if line != "## New session ##"]
    names = {a.name for a in module["UserAction"]}
    assert len(actions) == 16
    assert set(actions) <= names
    for i, line in enumerate(lines):
        if line == "## New session ##":
            assert lines[i + 1] == "SignIn"
