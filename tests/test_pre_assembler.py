import pytest

from mcroasm.macro_table import MacroTable
from mcroasm.pre_assembler import (
    MAX_MACRO_LINES,
    LineType,
    PreAssemblyError,
    determine_line_type,
    expand_macros,
    is_reserved_word,
    pre_assemble_file,
)


@pytest.mark.parametrize("word", ["mov", "stop", ".data", ".extern", "r0", "r7"])
def test_reserved_words(word):
    assert is_reserved_word(word) is True


@pytest.mark.parametrize("word", ["r8", "loop", "mcro", "MOV", ""])
def test_not_reserved_words(word):
    assert is_reserved_word(word) is False


def test_line_types_outside_macro():
    macros = MacroTable()
    macros.add("m1", ["inc r1\n"])
    assert determine_line_type("   \n", False, macros) == (LineType.IGNORE, None)
    assert determine_line_type("; note\n", False, macros) == (LineType.IGNORE, ";")
    assert determine_line_type("mcro m2\n", False, macros) == (
        LineType.MACRO_DEF_START,
        "mcro",
    )
    assert determine_line_type("  m1\n", False, macros) == (LineType.MACRO_CALL, "m1")
    assert determine_line_type("mov r1, r2\n", False, macros) == (
        LineType.REGULAR,
        "mov",
    )


def test_line_types_inside_macro():
    macros = MacroTable()
    assert determine_line_type("mcroend\n", True, macros)[0] is LineType.MACRO_DEF_END
    assert determine_line_type("; c\n", True, macros)[0] is LineType.MACRO_CONTENT
    assert determine_line_type("\n", True, macros)[0] is LineType.IGNORE


def test_expand_simple_macro():
    lines = ["mcro m1\n", " inc r2\n", " mov A, r1\n", "mcroend\n", "m1\n", "stop\n"]
    assert expand_macros(lines) == [" inc r2\n", " mov A, r1\n", "stop\n"]


def test_expand_keeps_comments_and_blank_lines():
    lines = ["; comment\n", "\n", "mov r1, r2\n"]
    assert expand_macros(lines) == lines


def test_macro_used_twice():
    lines = ["mcro m\n", "a\n", "mcroend\n", "m\n", "m\n"]
    assert expand_macros(lines) == ["a\n", "a\n"]


def test_reserved_macro_name_raises():
    with pytest.raises(PreAssemblyError) as info:
        expand_macros(["mcro mov\n", "mcroend\n"])
    assert info.value.line_number == 1
    assert "reserved word" in str(info.value)


def test_duplicate_macro_raises():
    lines = ["mcro m\n", "a\n", "mcroend\n", "mcro m\n", "mcroend\n"]
    with pytest.raises(PreAssemblyError) as info:
        expand_macros(lines)
    assert info.value.line_number == 4
    assert str(info.value) == "Error on line 4: Duplicate definition of macro 'm'."


def test_macro_at_limit_is_accepted():
    body = [f"inc r{i % 8}\n" for i in range(MAX_MACRO_LINES)]
    lines = ["mcro big\n", *body, "mcroend\n", "big\n"]
    assert expand_macros(lines) == body


def test_macro_too_long_raises():
    body = ["inc r1\n"] * (MAX_MACRO_LINES + 1)
    with pytest.raises(PreAssemblyError) as info:
        expand_macros(["mcro big\n", *body, "mcroend\n"])
    assert info.value.line_number == MAX_MACRO_LINES + 2


def test_pre_assemble_file_writes_output(tmp_path):
    base = tmp_path / "prog"
    (tmp_path / "prog.as").write_text("mcro m1\n inc r2\nmcroend\nm1\nstop\n")
    result = pre_assemble_file(base)
    assert result == tmp_path / "prog.am"
    assert result.read_text() == " inc r2\nstop\n"


def test_pre_assemble_file_removes_output_on_error(tmp_path):
    base = tmp_path / "bad"
    (tmp_path / "bad.am").write_text("stale\n")
    (tmp_path / "bad.as").write_text("mcro r1\nmcroend\n")
    with pytest.raises(PreAssemblyError):
        pre_assemble_file(base)
    assert not (tmp_path / "bad.am").exists()


def test_pre_assemble_missing_input(tmp_path):
    with pytest.raises(PreAssemblyError) as info:
        pre_assemble_file(tmp_path / "absent")
    assert "Failed to open input file" in str(info.value)
    assert not (tmp_path / "absent.am").exists()


def test_long_line_passes_through_unchanged(tmp_path):
    text = "mov " + "x" * 150 + "\n"
    (tmp_path / "long.as").write_text(text)
    assert pre_assemble_file(tmp_path / "long").read_text() == text


def test_long_line_is_read_in_chunks(tmp_path):
    source = "mcro m1\ninc r3\nmcroend\n" + " " * 80 + "m1\n"
    (tmp_path / "chunk.as").write_text(source)
    output = pre_assemble_file(tmp_path / "chunk").read_text()
    assert output == " " * 80 + "inc r3\n"