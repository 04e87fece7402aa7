import pandas as pd

from geocoder_lexer.__main__ import main


def test_clean_command_prints_normalized_sentence(capsys):
    assert main(["clean", "123 Main St, V8W 1P6", "123--45 Main St"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == ["123", "Main", "St", "/PJ"]
    assert lines[1] == "123 /FG 45 Main St"


def test_clean_command_without_special_rules(capsys):
    main(["--ruleset", "dra", "clean", "--no-special", "PO BOX 5"])
    assert capsys.readouterr().out.strip() == "PO BOX 5"


def test_batch_command_writes_csv(tmp_path, capsys):
    src = tmp_path / "in.csv"
    dst = tmp_path / "out.csv"
    pd.DataFrame({"street": ["RR 2 Duncan", None], "id": [1, 2]}).to_csv(src, index=False)

    assert main(["batch", str(src), str(dst), "--column", "street"]) == 0

    result = pd.read_csv(dst, keep_default_na=False)
    assert result.loc[0, "cleaned_address"].split() == ["Duncan", "/PJ"]
    assert "row 1:" in capsys.readouterr().err
