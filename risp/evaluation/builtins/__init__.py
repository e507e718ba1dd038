"""Registry of builtin forms for the RISP evaluator.

Maps names to handler functions. The evaluator consults this table before any
user binding, so these names cannot be shadowed by `define` or `defn`.
Handlers receive the unevaluated argument nodes and decide for themselves
what to evaluate.
"""

from risp.evaluation.builtins.arithmetic_forms import add_form, subtract_form
from risp.evaluation.builtins.define_form import define_form
from risp.evaluation.builtins.list_forms import (
    append_form,
    car_form,
    cdr_form,
    is_empty_form,
    is_nil_form,
    prepend_form,
)
from risp.evaluation.builtins.println_form import println_form

BUILTINS = {
    "add": add_form,
    "subtract": subtract_form,
    "define": define_form,
    "car": car_form,
    "cdr": cdr_form,
    "is-empty": is_empty_form,
    "is-nil": is_nil_form,
    "append": append_form,
    "prepend": prepend_form,
    "println": println_form,
}

# Signatures shown by the REPL help and the language server
BUILTIN_SIGNATURES = {
    "add": "(add number ...)",
    "subtract": "(subtract number ...)",
    "define": "(define name value)",
    "car": "(car list)",
    "cdr": "(cdr list)",
    "is-empty": "(is-empty list)",
    "is-nil": "(is-nil value)",
    "append": "(append list value)",
    "prepend": "(prepend list value)",
    "println": "(println value ...)",
}
