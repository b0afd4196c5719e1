import os
import tempfile

import pytest

from cellframe.commands.peek import build_parser, main

SHOPS_CSV_FILE = tempfile.NamedTemporaryFile(delete=False, mode="w+", suffix=".csv")


def setup_module():
    SHOPS_CSV_FILE.write(
        "shop,city,n_employees,revenue\n"
        "Shop B,Rome,15,2.5\n"
        "Shop A,Milan,10,1.5\n"
        "Shop C,Rome,,nan\n"
    )
    SHOPS_CSV_FILE.close()


def teardown_module():
    os.unlink(SHOPS_CSV_FILE.name)


def test_parser_defaults():
    args = build_parser().parse_args(["data.csv"])
    assert args.filename == "data.csv"
    assert args.delimiter == ","
    assert args.head is None
    assert not args.dropna


def test_shape_and_dtypes(capsys):
    assert main([SHOPS_CSV_FILE.name, "--shape", "--dtypes"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "(4, 3)",
        "shop: str",
        "city: str",
        "n_employees: int",
        "revenue: float",
    ]


def test_dropna_sort_and_head(capsys):
    args = [SHOPS_CSV_FILE.name, "--dropna", "--sort-values", "revenue", "--head", "1"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "shop   | city  | n_employees | revenue",
        "------ | ----- | ----------- | -------",
        "Shop A | Milan | 10          | 1.50   ",
    ]


def test_describe(capsys):
    assert main([SHOPS_CSV_FILE.name, "--describe"]) == 0
    out = capsys.readouterr().out
    assert "shop: No numeric data" in out
    assert "n_employees: count = 2, mean = 12.500000, min = 10.000000, max = 15.000000" in out


def test_value_counts(capsys):
    assert main([SHOPS_CSV_FILE.name, "--value-counts"]) == 0
    out = capsys.readouterr().out
    assert "city: {Rome: 2, Milan: 1}" in out


def test_missing_file(capsys):
    assert main([SHOPS_CSV_FILE.name + ".missing"]) == 1
    assert capsys.readouterr().out.startswith("Unable to load file")


def test_sort_unknown_column(capsys):
    assert main([SHOPS_CSV_FILE.name, "--sort-values", "country"]) == 1
    assert "country" in capsys.readouterr().out


def test_invalid_arguments():
    with pytest.raises(SystemExit):
        main([SHOPS_CSV_FILE.name, "--head", "many"])
