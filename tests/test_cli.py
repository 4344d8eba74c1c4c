import io
import os
import json

import pytest

from modprime.cli import main, parse_u64

def test_parse_u64():
    assert parse_u64("97") == 97
    assert parse_u64(" 0xff ") == 255
    assert parse_u64("1_000_003") == 1000003
    assert parse_u64(str((1 << 64) - 1)) == (1 << 64) - 1
    for bad in ("-1", str(1 << 64), "abc", ""):
        with pytest.raises(ValueError):
            parse_u64(bad)

def test_check_args(capsys):
    rc = main(["check", "97", "561", "18446744073709551557"])
    out = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert out == ["97\tprime", "561\tcomposite", "18446744073709551557\tprime"]

def test_check_witnesses(capsys):
    main(["check", "--witnesses", "2047"])
    line = capsys.readouterr().out.strip()
    n, verdict, bases = line.split("\t")
    assert (n, verdict) == ("2047", "composite")
    assert "2" not in bases.split(",")

def test_check_json(capsys):
    main(["check", "--json", "341550071728321"])
    obj = json.loads(capsys.readouterr().out)
    assert obj == {"n": "341550071728321", "prime": False}

def test_check_stdin_skips_bad_lines(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n\nnope\n9\n"))
    rc = main(["check"])
    cap = capsys.readouterr()
    assert rc == 1
    assert cap.out.splitlines() == ["7\tprime", "9\tcomposite"]
    assert "# skip: nope" in cap.err

def test_next_and_prev(capsys):
    assert main(["next", "90"]) == 0
    assert json.loads(capsys.readouterr().out)["prime"] == 97
    assert main(["prev", "90"]) == 0
    assert json.loads(capsys.readouterr().out)["prime"] == 89

def test_next_past_ceiling_fails(capsys):
    assert main(["next", "18446744073709551600"]) == 1
    assert "error:" in capsys.readouterr().err

def test_verify(capsys):
    assert main(["verify", "--upto", "2000"]) == 0
    assert "0 mismatches" in capsys.readouterr().out

def test_check_witnesses_even_has_no_empty_field(capsys):
    main(["check", "--witnesses", "4", "9"])
    assert capsys.readouterr().out.splitlines() == ["4\tcomposite", "9\tcomposite\t2,3,5,7"]

def test_verify_rejects_negative_bound(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["verify", "--upto", "-1"])
    assert exc.value.code == 2
    assert "non-negative" in capsys.readouterr().err

def test_verify_zero(capsys):
    assert main(["verify", "--upto", "0"]) == 0
    assert "0 primes, 0 mismatches" in capsys.readouterr().out

@pytest.mark.skipif(not os.getenv("MODPRIME_FULL_SWEEP"),
                    reason="set MODPRIME_FULL_SWEEP=1 for the exhaustive 10^7 sweep")
def test_verify_exhaustive_below_ten_million(capsys):
    assert main(["verify", "--upto", "10000000"]) == 0
    assert "664579 primes, 0 mismatches" in capsys.readouterr().out
