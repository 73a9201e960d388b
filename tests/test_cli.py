import pytest

from mhopt.cli import build_parser, main, resolve_config


def test_grasp_run_prints_result(qbf_path, capsys):
    code = main(["--algorithm", "grasp", "--instance", str(qbf_path), "--iterations", "3", "-q"])
    out = capsys.readouterr().out
    assert code == 0
    assert "maxVal = 2.0" in out
    assert "bestSol = Solution: cost=[-2.0], size=[1], elements=[0]" in out
    assert "Time = " in out


def test_ga_run_with_config_file(tmp_path, qbf_path, capsys):
    spec = tmp_path / "run.yaml"
    spec.write_text(
        f"algorithm: ga\ninstance: {qbf_path.as_posix()}\nga:\n  generations: 4\n  pop_size: 6\n",
        encoding="utf-8",
    )
    code = main(["--config", str(spec), "-q"])
    assert code == 0
    assert "maxVal = " in capsys.readouterr().out


def test_cli_arguments_override_config_file(tmp_path):
    spec = tmp_path / "run.json"
    spec.write_text('{"algorithm": "ga", "instance": "a", "ga": {"pop_size": 10}}', encoding="utf-8")
    args = build_parser().parse_args(["--config", str(spec), "--pop-size", "20", "--seed", "7"])
    cfg = resolve_config(args)
    assert cfg.instance == "a"
    assert cfg.ga.pop_size == 20
    assert cfg.seed == 7
    assert cfg.grasp.first_improving is False


def test_missing_instance_is_reported(tmp_path, capsys):
    assert main(["--instance", str(tmp_path / "nope"), "-q"]) == 1
    assert "error: Instance file not found" in capsys.readouterr().err


def test_missing_required_instance(capsys):
    assert main(["-q"]) == 1
    assert "instance" in capsys.readouterr().err


def test_malformed_config_file_is_reported(tmp_path, capsys):
    spec = tmp_path / "run.yaml"
    spec.write_text("algorithm: [ga\n", encoding="utf-8")
    assert main(["--config", str(spec), "-q"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: ")
    assert "malformed" in err


def test_missing_config_file(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "none.yaml"), "-q"]) == 1
    assert "does not exist" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["--alpha", "2"], ["--pop-size", "0"], ["--algorithm", "tabu"]])
def test_argument_validation(argv):
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(argv)
    assert info.value.code == 2
