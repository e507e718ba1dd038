import pytest

from risp.errors import (
    RispNotAFunction,
    RispTooFewArguments,
    RispTypeError,
    RispUndefinedFunction,
)
from risp.evaluation.evaluator import evaluate
from risp.reader.nodes import CallExpression, FunctionDeclaration, Identifier, NumberLiteral
from risp.reader.parser import parse_node
from risp.reader.tokenizer import tokenize
from risp.types.function import Function
from risp.types.nil import Nil
from risp.types.value import Type, to_display_string, values_equal


def test_literal_round_trip(env_stack):
    node = parse_node(tokenize("123"))
    assert node == NumberLiteral(123)
    value = evaluate(node, env_stack)
    assert value == 123
    assert to_display_string(value) == "123"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", 42),
        ("-7", -7),
        ('"hi there"', "hi there"),
        ("true", True),
        ("false", False),
        ("(list)", []),
        ("(list 1 (add 1 1) \"three\")", [1, 2, "three"]),
        ("(if true 1 2)", 1),
        ("(if false 1 2)", 2),
        ("(if 0 1 2)", 2),
        ('(if "" 1 2)', 2),
        ("(if (list 0) 1 2)", 1),
        ("(if nothing 1 2)", 2),
        ("(add -5 2)", -3),
        ("(if 1 true 0)", True),
        ("(if (list) true 0)", 0),
    ],
)
def test_expressions(run, source, expected):
    assert values_equal(run(source), expected)


def test_reading_variables(interpreter):
    interpreter.environment_stack.set("my-var", 3)
    assert interpreter.evaluate(Identifier("my-var")) == 3


def test_define_then_lookup(run):
    run("(define x 5)")
    assert run("x") == 5


def test_unbound_identifier_is_nil(run):
    assert run("never-defined") is Nil


def test_untaken_branch_is_not_evaluated(run, capsys):
    assert run('(if true 1 (println "else"))') == 1
    assert run('(if false (println "then") 2)') == 2
    assert capsys.readouterr().out == ""


def test_defn_binds_and_returns_function(run):
    fn = run("(defn add-one [a] (add a 1))")
    assert isinstance(fn, Function)
    assert to_display_string(fn) == "#<Function:add-one>"
    assert run("add-one") == fn
    assert run("(add-one 4)") == 5


def test_function_body_is_copied(env_stack):
    node = FunctionDeclaration("f", ["a"], CallExpression("add", [Identifier("a")]))
    fn = evaluate(node, env_stack)
    assert fn.body == node.body
    assert fn.body is not node.body


@pytest.mark.parametrize("call", ["(add-one 4 5)", "(add-one)"])
def test_wrong_arity(run, call):
    run("(defn add-one [a] (add a 1))")
    with pytest.raises(RispTooFewArguments):
        run(call)


def test_undefined_function(run):
    with pytest.raises(RispUndefinedFunction) as excinfo:
        run("(nope 1)")
    assert excinfo.value.name == "nope"


def test_not_a_function(run):
    run("(define y 3)")
    with pytest.raises(RispNotAFunction) as excinfo:
        run("(y)")
    assert excinfo.value.name == "y"


def test_builtins_cannot_be_shadowed(run):
    run("(defn add [a] a)")
    assert run("(add 1 2)") == 3


def test_arguments_are_evaluated_in_caller_scope(run):
    run("(defn pair-sum [a b] (add a b))")
    run("(define a 10)")
    assert run("(pair-sum 1 a)") == 11


def test_scoping_is_dynamic(run):
    run("(defn get-x [] x)")
    run("(defn call-with-x [x] (get-x))")
    # get-x sees the caller's frame, not its declaration site
    assert run("(call-with-x 7)") == 7
    assert run("(get-x)") is Nil


def test_define_inside_function_is_local(run):
    run("(defn set-local [] (define z 10))")
    assert run("(set-local)") == 10
    assert run("z") is Nil


def test_defn_inside_function_is_local(run):
    run("(defn make [] (defn inner [] 1))")
    run("(make)")
    with pytest.raises(RispUndefinedFunction):
        run("(inner)")


def test_recursion(run):
    run("(defn sum-to [n] (if n (add n (sum-to (subtract n 1))) 0))")
    assert run("(sum-to 10)") == 55


def test_frame_is_popped_when_body_fails(interpreter):
    interpreter.eval("(defn bad [a] (car a))")
    with pytest.raises(RispTypeError):
        interpreter.eval("(bad 1)")
    assert interpreter.environment_stack.depth == 0
    assert interpreter.eval("a") is Nil


def test_list_stops_at_first_failure(run, capsys):
    with pytest.raises(RispTypeError) as excinfo:
        run('(list 1 (car 2) (println "after"))')
    assert excinfo.value.expected is Type.LIST
    assert excinfo.value.actual is Type.NUMBER
    assert capsys.readouterr().out == ""


def test_arguments_evaluated_left_to_right(run, capsys):
    run('(defn second [a b] b)')
    assert run('(second (println "one") (println "two"))') == ["two"]
    assert capsys.readouterr().out == "one\ntwo\n"
