"""
Contract Tests Package

Property-based checks of the trace engine against the brute-force oracle.

TEST AXIOMS:
=============
1. Determinism: same graph + edge order = identical trace
2. Correctness: final results agree with removal-based definitions
3. Monotonicity: recorded state only grows along the trace
"""
