from timeit import timeit

from pymal.interpreter import Interpreter
from pymal.types.symbol import Symbol
from pymal.types.environment import Environment
from pymal.reader.parser import read_str, tokenize


def time_reader(code: str, rounds: int) -> float:
    """Time tokenizing and reading `code` into a form."""
    read_str(code)
    return timeit(lambda: read_str(code), number=rounds)


def time_interpreter(code: str, rounds: int, setup: str = "") -> float:
    """Time evaluation only: `code` is read once and the same form is
    evaluated repeatedly in one interpreter.
    """
    itp = Interpreter(prelude=None)
    if setup:
        itp.eval(setup)
    expr = read_str(code)
    # Warmup
    itp.evaluate(expr)
    # Timed
    return timeit(lambda: itp.evaluate(expr), number=rounds)


def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.set(key, 42)
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    # Warmup
    for _ in range(1000):
        env.get(key)
    # Timed
    return timeit(lambda: env.get(key), number=n_lookups)


CLOSURE_APPLY_CODE = "((fn* (x y) (+ x y)) 1 2)"

FACT_SETUP = "(def! fact (fn* (n) (if (<= n 1) 1 (* n (fact (- n 1))))))"
FACT_CODE = "(fact 100)"

FIB_SETUP = "(def! fib (fn* (n) (if (< n 2) n (+ (fib (- n 1)) (fib (- n 2))))))"
FIB_CODE = "(fib 15)"

LET_CODE = "(let* (a 1 b (+ a 1) c (+ b 1) d [a b c]) (count d))"

READER_CODE = '(def! f (fn* (a & rest) {:a a :rest rest "s" "x\\ny"})) ; comment'


if __name__ == "__main__":
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    print(f"Benchmark: reader ({len(tokenize(READER_CODE))} tokens)")
    print(f"  time: {time_reader(READER_CODE, rounds=20000):.6f}s")

    for name, code, setup, rounds in [
        ("closure application", CLOSURE_APPLY_CODE, "", 20000),
        ("let* bindings", LET_CODE, "", 20000),
        ("recursive factorial", FACT_CODE, FACT_SETUP, 500),
        ("recursive fibonacci", FIB_CODE, FIB_SETUP, 20),
    ]:
        print(f"Benchmark: {name}")
        print(f"  interpreter: {time_interpreter(code, rounds, setup):.6f}s  [rounds={rounds}]")
