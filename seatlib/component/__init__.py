'''Pluggable components of attribution factories.

Each module holds a register of pure functions of one kind (divisors, rank
indices, rank scores) keyed by name, so that factories can accept either
a name or a custom callable.
'''
