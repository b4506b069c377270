import io
import sys

from labkit.matcalc import MAX_ARGS, PROMPT, Calculator, main, split_args
from labkit.matrix import Matrix


def _loaded(values, name="B_MAT"):
    calc = Calculator()
    calc.execute(f"read_mat {name}, " + ", ".join(str(v) for v in values))
    return calc


def test_split_args_trims():
    assert split_args(" A_MAT ,  1,2 ") == ["A_MAT", "1", "2"]


def test_split_args_drops_empty_fields():
    assert split_args(",,a,,b,") == ["a", "b"]


def test_split_args_keeps_blank_field():
    assert split_args(" , x") == ["", "x"]


def test_split_args_limit():
    assert len(split_args(",".join(["x"] * 30))) == MAX_ARGS


def test_read_and_print():
    calc = _loaded([1, 2, 3], name="A_MAT")
    expected = Matrix()
    expected.read([1, 2, 3])
    assert calc.matrices["A_MAT"] == expected
    assert calc.execute("print_mat A_MAT") == expected.format()


def test_read_uses_leading_number_of_argument():
    calc = Calculator()
    calc.execute("read_mat A_MAT, 1.5x, abc, -2e1")
    assert calc.matrices["A_MAT"].data[0][:3] == [1.5, 0.0, -20.0]


def test_read_missing_name():
    assert Calculator().execute("read_mat") == "Missing matrix name\n"


def test_undefined_matrix():
    calc = Calculator()
    assert calc.execute("read_mat G_MAT, 1") == "Undefined matrix name\n"
    assert calc.execute("add_mat A_MAT, B_MAT, X") == "Undefined matrix name\n"
    assert calc.execute("trans_mat A_MAT, Z") == "Undefined matrix name\n"


def test_wrong_argument_counts():
    calc = Calculator()
    assert calc.execute("print_mat A_MAT, B_MAT") == "Incorrect number of arguments\n"
    assert calc.execute("add_mat A_MAT, B_MAT") == "Incorrect number of arguments\n"
    assert calc.execute("mul_scalar A_MAT, 2") == "Incorrect number of arguments\n"
    assert calc.execute("trans_mat A_MAT") == "Incorrect number of arguments\n"


def test_undefined_command():
    assert Calculator().execute("read_mat,A_MAT") == "Undefined command name\n"


def test_add_sub_mul_store_into_first_name():
    calc = _loaded(range(1, 17))
    calc.execute("read_mat C_MAT, " + ", ".join(str(v) for v in range(16, 0, -1)))
    b, c = calc.matrices["B_MAT"], calc.matrices["C_MAT"]
    calc.execute("add_mat A_MAT, B_MAT, C_MAT")
    assert calc.matrices["A_MAT"] == b.add(c)
    calc.execute("sub_mat D_MAT, B_MAT, C_MAT")
    assert calc.matrices["D_MAT"] == b.sub(c)
    calc.execute("mul_mat E_MAT, B_MAT, C_MAT")
    assert calc.matrices["E_MAT"] == b.mul(c)


def test_mul_scalar_and_transpose():
    calc = _loaded(range(1, 17))
    b = calc.matrices["B_MAT"]
    calc.execute("mul_scalar A_MAT, 2, B_MAT")
    assert calc.matrices["A_MAT"] == b.add(b)
    calc.execute("trans_mat C_MAT, B_MAT")
    assert calc.matrices["C_MAT"] == b.transposed()


def test_transpose_in_place_is_true_transpose():
    calc = _loaded(range(1, 17))
    original = calc.matrices["B_MAT"]
    calc.execute("trans_mat B_MAT, B_MAT")
    assert calc.matrices["B_MAT"] == original.transposed()


def test_stop_sets_flag():
    calc = Calculator()
    assert calc.execute("stop") == "Program terminated.\n"
    assert calc.stopped is True


def test_run_stops_and_skips_rest():
    calc = Calculator()
    out = io.StringIO()
    lines = ["read_mat A_MAT, 1\n", "stop\n", "read_mat A_MAT, 9\n"]
    assert calc.run(lines, out) is True
    text = out.getvalue()
    assert text.count("You entered:") == 2
    assert "Program terminated." in text
    assert "EOF encountered" not in text
    assert calc.matrices["A_MAT"].data[0][0] == 1.0


def test_run_reports_eof_and_ignores_blank_lines():
    calc = Calculator()
    out = io.StringIO()
    assert calc.run(["   \n", "print_mat A_MAT\n"], out) is False
    text = out.getvalue()
    assert text.startswith(PROMPT + "You entered:    \n" + PROMPT)
    assert Matrix().format() in text
    assert text.endswith("EOF encountered without 'stop' command.\n")


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("bogus\nstop\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Undefined command name" in out
    assert "Program terminated." in out