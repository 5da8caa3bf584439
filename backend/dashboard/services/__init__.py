"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services await IO (DB, identity) and call core functions for every decision
    - One file per action family: invoice writes, invoice reads, login

Design Decisions:
    - Classes take their collaborators in __init__ (session or mutations, view cache) so
      routes construct them per request and tests pass fakes
"""
