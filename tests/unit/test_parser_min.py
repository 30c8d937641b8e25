import pytest
from src.asm364.parser import parse, parse_line, parse_immediate, parse_operands
from src.asm364.diagnostics import AsmSyntaxError
from src.asm364.ast import Instruction, Reg, Imm
from src.asm364.isa import spec

@pytest.mark.parametrize("n", range(16))
def test_decimal_and_hex_agree(n):
    assert parse_immediate(str(n)) == n
    assert parse_immediate("0x" + format(n, "x")) == n
    assert parse_immediate("0x" + format(n, "02X")) == n

@pytest.mark.parametrize("tok", ["16", "-1", "0x10", "0xff", "255"])
def test_immediate_out_of_range(tok):
    with pytest.raises(ValueError, match="must be between 0 and 15 inclusive"):
        parse_immediate(tok)

@pytest.mark.parametrize("tok", ["abc", "0x", "0xg", "1_0", "0b1", "0o7", "0x0x1", "r1", "", "+5", "0x+5", "0x-1"])
def test_immediate_malformed(tok):
    with pytest.raises(ValueError, match="invalid literal"):
        parse_immediate(tok)

@pytest.mark.parametrize("src", ["addi r1 r2 +5", "addi r1 r2 0x+5", "set r1 +1 0"])
def test_plus_sign_rejected(src):
    with pytest.raises(AsmSyntaxError, match="invalid literal"):
        parse_line(src, 1)

def test_parse_operands_count_uses_written_name():
    with pytest.raises(ValueError, match="instruction 'MOVE' expects 2 operands, 1 provided"):
        parse_operands(spec("move"), ["r0"], mnemonic="move")
    with pytest.raises(ValueError, match="instruction 'MOV' expects 2 operands, 3 provided"):
        parse_operands(spec("move"), ["r0", "r1", "r2"])

def test_alias_named_in_count_error():
    with pytest.raises(AsmSyntaxError, match="instruction 'MOVEZ' expects 3 operands"):
        parse_line("movez r1 r2", 1)

def test_parse_operands_schema_driven():
    ops = parse_operands(spec("incz"), ["pc", "0xa", "in"])
    assert ops == [Reg("pc", 0xF), Imm(10), Reg("in", 6)]

def test_parse_line_simple():
    ins = parse_line("ADD r2 r3 r4", 1)
    assert isinstance(ins, Instruction)
    assert ins.mnemonic == "add" and ins.opcode == 0x4
    assert ins.nibbles() == (2, 3, 4)
    assert ins.line == 1

def test_parse_line_skips():
    assert parse_line("", 1) is None
    assert parse_line("   # comment", 2) is None

def test_unknown_mnemonic_names_token():
    with pytest.raises(AsmSyntaxError) as ei:
        parse_line("jmp r0", 4)
    assert ei.value.line == 4
    assert "jmp" in ei.value.message

def test_unknown_register_message():
    with pytest.raises(AsmSyntaxError) as ei:
        parse_line("mov r0 r16", 1)
    assert "register" in ei.value.message
    assert "r16" in ei.value.message

@pytest.mark.parametrize("src, expected, provided", [
    ("mov r0", 2, 1),
    ("mov r0 r1 r2", 2, 3),
    ("add r1 r2", 3, 2),
    ("set pc 1 2 3", 3, 4),
])
def test_wrong_operand_count(src, expected, provided):
    with pytest.raises(AsmSyntaxError) as ei:
        parse_line(src, 9)
    assert f"expects {expected} operands, {provided} provided" in ei.value.message

def test_immediate_in_register_slot_rejected():
    with pytest.raises(AsmSyntaxError, match="register"):
        parse_line("addi 1 r2 3", 1)

def test_register_in_immediate_slot_rejected():
    with pytest.raises(AsmSyntaxError, match="invalid numeric value"):
        parse_line("addi r1 r2 r3", 1)

def test_trailing_hash_is_a_token():
    with pytest.raises(AsmSyntaxError, match="expects 2 operands"):
        parse_line("mov r0 r1 # copy", 1)

SRC = [
    "# program",
    "",
    "mov r0 r1",
    "  set pc 0x0f 0x00",
    "addi r1 r2 16",
    "mov r2 r3",
]

def test_parse_is_lazy_and_fail_fast():
    it = parse(SRC)
    first = next(it)
    assert first.line == 3
    second = next(it)
    assert second.line == 4
    with pytest.raises(AsmSyntaxError) as ei:
        next(it)
    assert ei.value.line == 5
    assert "must be between 0 and 15 inclusive" in ei.value.message

def test_parse_counts_skipped_lines():
    with pytest.raises(AsmSyntaxError) as ei:
        list(parse(["# comment", "", "foo r0 r1"]))
    assert ei.value.line == 3
