import io

import pytest

from lisk import config
from lisk.errors import LiskParseError, LiskUnboundSymbol
from lisk.interpreter import Interpreter
from lisk.repl import run_repl
from lisk.types.nil import Nil


def test_interpreter_keeps_bindings_between_calls():
    interp = Interpreter()
    assert interp.eval("(define fact (lambda (n) (if (<= n 1) 1 (* n (fact (- n 1))))))") is Nil
    assert interp.eval("(fact 5)") == 120
    assert interp.eval_to_source("(fact 10)") == "3628800"


def test_interpreter_errors_propagate():
    interp = Interpreter()
    with pytest.raises(LiskParseError):
        interp.eval("")
    with pytest.raises(LiskUnboundSymbol):
        interp.eval("undefined_name")


def test_interpreters_are_isolated():
    first, second = Interpreter(), Interpreter()
    first.eval("(define x 1)")
    with pytest.raises(LiskUnboundSymbol):
        second.eval("x")


def _repl(source):
    stdin, stdout, stderr = io.StringIO(source), io.StringIO(), io.StringIO()
    run_repl(Interpreter(), stdin, stdout, stderr, prompt="> ")
    return stdout.getvalue(), stderr.getvalue()


def test_repl_prints_results():
    out, err = _repl("(define x 1)\n(+ x 1)\n(quote (a 1.5 #t))\n")
    assert out == "> nil\n> 2\n> (a 1.5 #t)\n> \n"
    assert err == ""


def test_repl_reports_errors_and_continues():
    out, err = _repl("(define x 1)\nundefined\n(+ x\n)\n(+ x 2)\n")
    assert out == "> nil\n> > > > 3\n> \n"
    assert err.splitlines() == [
        "error: LiskUnboundSymbol: Cannot lookup unbound symbol undefined",
        "error: LiskParseError: Unmatched '(': list is not terminated",
        "error: LiskParseError: Unexpected ')'",
    ]


def test_repl_skips_blank_lines():
    out, err = _repl("\n   \n1\n")
    assert out == "> > > 1\n> \n"
    assert err == ""


def test_repl_reports_stack_exhaustion():
    out, err = _repl("(define loop (lambda (n) (loop n)))\n(loop 1)\n(+ 1 1)\n")
    assert out.endswith("> 2\n> \n")
    assert err.startswith("error: RecursionError")


def test_config_defaults(monkeypatch):
    monkeypatch.delenv("LISK_PROMPT", raising=False)
    monkeypatch.delenv("LISK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LISK_RECURSION_LIMIT", raising=False)
    assert config.get_prompt() == "lisk> "
    assert config.get_log_level() == 30
    assert config.get_recursion_limit() is None


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("LISK_PROMPT", "? ")
    monkeypatch.setenv("LISK_LOG_LEVEL", "debug")
    monkeypatch.setenv("LISK_RECURSION_LIMIT", "5000")
    assert config.get_prompt() == "? "
    assert config.get_log_level() == 10
    assert config.get_recursion_limit() == 5000
    monkeypatch.setenv("LISK_LOG_LEVEL", "chatty")
    monkeypatch.setenv("LISK_RECURSION_LIMIT", "lots")
    assert config.get_log_level() == 30
    assert config.get_recursion_limit() is None


def test_repl_survives_out_of_range_numerals():
    out, err = _repl("(define x 1)\n(<= 1.5 " + "9" * 400 + ")\n" + "1" * 5000 + "\nx\n")
    assert out == "> nil\n> #t\n> inf\n> 1\n> \n"
    assert err == ""


def test_repl_prompt_defaults_to_configuration(monkeypatch):
    monkeypatch.setenv("LISK_PROMPT", "?? ")
    stdout = io.StringIO()
    run_repl(Interpreter(), io.StringIO("1\n"), stdout, io.StringIO())
    assert stdout.getvalue() == "?? 1\n?? \n"
