import io

import pytest

from ilmachine.il_instructions import ArgType, Instruction, OpCode
from ilmachine.il_machine import Machine, main, run_program
from ilmachine.il_parser import parse_program
from ilmachine.textio import INT64_MAX, INT64_MIN


def run_text(text):
    out = io.StringIO()
    machine = run_program(parse_program(text), out)
    return machine, out.getvalue()


def run_ops(*pairs):
    out = io.StringIO()
    program = [Instruction(op, arg) for op, arg in pairs] + [Instruction(OpCode.RET)]
    return run_program(program, out), out.getvalue()


def test_load_and_store():
    machine, output = run_text("LD 42\nST\nRET")
    assert output == "42\n"
    assert machine.acc == 42
    assert machine.acc_type is ArgType.I64
    assert not machine.running


def test_ldn_matches_loading_negative():
    _, negated = run_text("LDN 7\nST\nRET")
    _, direct = run_text("LD -7\nST\nRET")
    assert negated == direct


def test_not_on_integer_equals_ldn():
    machine, _ = run_ops((OpCode.LD, 5), (OpCode.NOT, 0))
    other, _ = run_ops((OpCode.LDN, 5),)
    assert machine.acc == other.acc


def test_not_on_bool_flips():
    machine, _ = run_ops((OpCode.LD, 4), (OpCode.EQ, 4), (OpCode.NOT, 0), (OpCode.NOT, 0))
    once, _ = run_ops((OpCode.LD, 4), (OpCode.EQ, 4), (OpCode.NOT, 0))
    assert machine.acc + once.acc == 1
    assert machine.acc_type is ArgType.BOOL


def test_not_on_empty_accumulator_is_zero():
    machine, _ = run_ops((OpCode.ADD, 9), (OpCode.NOT, 0))
    assert machine.acc == 0


def test_stn_prints_negation_only_for_integers():
    _, integer_output = run_text("LD 3\nSTN\nRET")
    _, expected = run_text("LDN 3\nST\nRET")
    assert integer_output == expected
    _, bool_output = run_text("LD 3\nEQ 3\nSTN\nRET")
    assert bool_output == ""


def test_set_and_reset_print():
    assert run_text("LD 4\nEQ 4\nS\nR\nRET")[1] == "TRUE\n"
    assert run_text("LD 4\nNE 4\nS\nR\nRET")[1] == "FALSE\n"


def test_set_ignores_integer_accumulator():
    assert run_text("LD 1\nS\nR\nRET")[1] == ""


@pytest.mark.parametrize("a, b", [(3, 5), (5, 3), (4, 4), (-2, 1)])
@pytest.mark.parametrize(
    "first, second",
    [(OpCode.GT, OpCode.LE), (OpCode.LT, OpCode.GE), (OpCode.EQ, OpCode.NE)],
)
def test_comparisons_are_complementary(a, b, first, second):
    m1, _ = run_ops((OpCode.LD, a), (first, b))
    m2, _ = run_ops((OpCode.LD, a), (second, b))
    assert {m1.acc, m2.acc} == {0, 1}
    assert m1.acc_type is ArgType.BOOL and m2.acc_type is ArgType.BOOL


@pytest.mark.parametrize("acc, arg", [(5, 0), (5, 3), (0, 3), (0, 0)])
def test_negated_logic_is_complementary(acc, arg):
    plain, _ = run_ops((OpCode.LD, acc), (OpCode.AND, arg))
    negated, _ = run_ops((OpCode.LD, acc), (OpCode.ANDN, arg))
    if acc:
        assert plain.acc + negated.acc == 1
    else:
        assert plain.acc == negated.acc == 0
    plain, _ = run_ops((OpCode.LD, acc), (OpCode.OR, arg))
    negated, _ = run_ops((OpCode.LD, acc), (OpCode.ORN, arg))
    if acc:
        assert plain.acc == negated.acc == 1
    else:
        assert plain.acc + negated.acc == 1


def test_xor_twice_restores_value():
    machine, _ = run_ops((OpCode.LD, 6), (OpCode.XOR, 3), (OpCode.XOR, 3))
    assert machine.acc == 6
    assert machine.acc_type is ArgType.BOOL


def test_xorn_with_zero_and_nonzero_differ_by_one_bit():
    a, _ = run_ops((OpCode.LD, 6), (OpCode.XORN, 0))
    b, _ = run_ops((OpCode.LD, 6), (OpCode.XORN, 9))
    assert a.acc ^ b.acc == 1


def test_arithmetic_round_trip():
    machine, _ = run_ops(
        (OpCode.LD, 10), (OpCode.ADD, 7), (OpCode.SUB, 7), (OpCode.MUL, 3), (OpCode.DIV, 3)
    )
    assert machine.acc == 10


def test_division_truncates_toward_zero():
    machine, _ = run_ops((OpCode.LD, -7), (OpCode.DIV, 2))
    assert machine.acc == -3


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        run_ops((OpCode.LD, 1), (OpCode.DIV, 0))


def test_addition_wraps():
    machine, _ = run_ops((OpCode.LD, INT64_MAX), (OpCode.ADD, 1))
    assert machine.acc == INT64_MIN


def test_jmp_skips_instructions():
    machine, output = run_text("LD 1\nJMP skip\nST\nskip:\nRET")
    assert output == ""
    assert machine.acc == 1


def test_conditional_jumps():
    text = "LD {}\nGT 5\nJMPCN low\nLD 100\nST\nlow:\nRET"
    assert run_text(text.format(2))[1] == ""
    assert run_text(text.format(9))[1] == "100\n"
    text = "LD {}\nGT 5\nJMPC high\nLD 100\nST\nhigh:\nRET"
    assert run_text(text.format(9))[1] == ""
    assert run_text(text.format(2))[1] == "100\n"


def test_running_off_the_end_stops():
    machine = run_program([Instruction(OpCode.LD, 3)], io.StringIO())
    assert machine.acc == 3
    assert not machine.running


def test_step_after_halt_raises():
    machine = Machine([Instruction(OpCode.RET)], io.StringIO())
    machine.step()
    assert not machine.running
    with pytest.raises(RuntimeError):
        machine.step()


def test_step_advances_ip():
    machine = Machine(parse_program("LD 1\nST\nRET"), io.StringIO())
    machine.step()
    assert machine.ip == 1
    assert machine.running


def test_main_runs_file(tmp_path, monkeypatch, capsys):
    (tmp_path / "commands.txt").write_text("LD 8\nST\nRET\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert capsys.readouterr().out == "Readed file\n8\nProgram finished\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "none.txt")]) == 0
    assert capsys.readouterr().out == "File not found\n"


def test_main_reports_parse_error(tmp_path, capsys):
    path = tmp_path / "prog.txt"
    path.write_text("FOO\nRET\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Command not found: FOO\n"