import pytest

from risp.errors import (
    RispArgumentError,
    RispIOError,
    RispMissingToken,
    RispNotAFunction,
    RispTooFewArguments,
    RispTypeError,
    RispUndefinedFunction,
    RispUnexpectedToken,
)
from risp.interpreter import Interpreter, parse_and_evaluate
from risp.reader.tokenizer import CLOSING_PARENTHESIS, Token, TokenKind
from risp.types.nil import Nil
from risp.types.value import Type


def test_eval_empty_source_is_nil(interpreter):
    assert interpreter.eval("") is Nil
    assert interpreter.eval("   \n") is Nil


def test_eval_returns_last_value(interpreter):
    assert interpreter.eval("1 2 (add 1 2)") == 3


def test_definitions_persist_between_calls(interpreter):
    interpreter.eval("(defn double [n] (add n n))")
    interpreter.eval("(define x 21)")
    assert interpreter.eval("(double x)") == 42


def test_parse_error_after_earlier_expressions_ran(interpreter, capsys):
    with pytest.raises(RispMissingToken):
        interpreter.eval('(println "first") (add 1')
    # Expressions are parsed lazily, so earlier ones have already run
    assert capsys.readouterr().out == "first\n"


def test_parse_and_evaluate():
    assert parse_and_evaluate("(add 1 2)") == 3
    # Only the first expression is read
    assert parse_and_evaluate("1 2") == 1


def test_parse_and_evaluate_with_interpreter():
    interpreter = Interpreter()
    parse_and_evaluate("(define x 4)", interpreter)
    assert parse_and_evaluate("(add x 1)", interpreter) == 5


def test_evaluate_file(tmp_path, interpreter, capsys):
    source = tmp_path / "program.risp"
    source.write_text(
        "(defn square-sum [a b] (add a b))\n"
        '(println "result" (square-sum 2 3))\n'
        "(square-sum 10 20)\n",
        encoding="utf-8",
    )
    assert interpreter.evaluate_file(source) == 30
    assert capsys.readouterr().out == "result 5\n"


def test_evaluate_file_keeps_definitions(tmp_path, interpreter):
    source = tmp_path / "lib.risp"
    source.write_text("(defn inc [n] (add n 1))", encoding="utf-8")
    interpreter.evaluate_file(str(source))
    assert interpreter.eval("(inc 1)") == 2


def test_evaluate_missing_file(tmp_path, interpreter):
    with pytest.raises(RispIOError) as excinfo:
        interpreter.evaluate_file(tmp_path / "missing.risp")
    assert excinfo.value.kind == "NotFound"
    assert repr(excinfo.value) == "IOError(NotFound)"


def test_evaluate_directory(tmp_path, interpreter):
    with pytest.raises(RispIOError) as excinfo:
        interpreter.evaluate_file(tmp_path)
    assert excinfo.value.kind == "IsADirectory"


def test_evaluate_file_with_invalid_utf8(tmp_path, interpreter):
    source = tmp_path / "bad.risp"
    source.write_bytes(b"\xff\xfe(add 1 2)")
    with pytest.raises(RispIOError) as excinfo:
        interpreter.evaluate_file(source)
    assert excinfo.value.kind == "InvalidData"


@pytest.mark.parametrize(
    "error,expected",
    [
        (RispUnexpectedToken(CLOSING_PARENTHESIS), "UnexpectedToken(Token(CLOSING_PARENTHESIS))"),
        (RispUnexpectedToken(Token(TokenKind.NUMBER, 1)), "UnexpectedToken(Token(NUMBER, 1))"),
        (RispMissingToken(), "MissingToken"),
        (RispUndefinedFunction("f"), 'UndefinedFunction("f")'),
        (RispNotAFunction("x"), 'NotAFunction("x")'),
        (RispArgumentError("bad"), "ArgumentError"),
        (RispTooFewArguments(), "TooFewArguments"),
        (RispTypeError(Type.NUMBER, Type.STRING), "TypeError { expected: Number, actual: String }"),
    ],
)
def test_error_debug_forms(error, expected):
    assert repr(error) == expected


def test_error_messages():
    assert str(RispMissingToken()) == "MissingToken"
    assert str(RispArgumentError("bad shape")) == "bad shape"
    assert str(RispTypeError(Type.LIST, Type.NIL)) == "Expected List, got Nil"
