'''Common functionality for components.

Functions to build function registers and retrievers around them.
There should normally be no need to use these functions directly.
'''

from typing import Callable, Dict, Tuple, Union


def marker(register: Dict[str, Callable],
           name: str,
           signature,
           ) -> Callable[..., Callable]:
    '''A registration decorator factory.

    The decorator registers the function under its own name. Additional names
    (aliases) may be given by calling the decorator with them first, as in
    ``@mark('jefferson')``.
    '''
    def mark_function(func=None, *aliases: str):
        if isinstance(func, str):
            aliases = (func, ) + aliases

            def mark_with_aliases(real_func):
                return mark_function(real_func, *aliases)
            return mark_with_aliases
        register[func.__name__] = func
        for alias in aliases:
            register[alias] = func
        return func
    return mark_function


def getter(register: Dict[str, Callable],
           name: str,
           signature,
           ) -> Callable[[str], Callable]:
    '''A register retriever factory.'''
    def get(func_def: str) -> signature:
        try:
            return register[func_def]
        except KeyError:
            raise KeyError(f'unknown {name}: {func_def}')
    get.__doc__ = f'Return a {name} function by its name.'
    return get


def constructer(register: Dict[str, Callable],
                name: str,
                signature,
                ) -> Callable[[Union[str, Callable]], Callable]:
    '''A register implicit retriever/passthrough function factory.'''
    get = getter(register, name, signature)

    def construct(func_def: Union[str, signature]) -> signature:
        return func_def if callable(func_def) else get(func_def)
    construct.__doc__ = (
        f'Construct a {name} function.\n\n'
        f'Get a {name} function by its name from the register. If a custom\n'
        'callable is given, pass it through unchanged.'
    )
    return construct


def register_functions(*args, **kwargs) -> Tuple[Callable, Callable, Callable]:
    '''Construct the marker, getter and constructer functions at one call.'''
    return (
        marker(*args, **kwargs),
        getter(*args, **kwargs),
        constructer(*args, **kwargs),
    )
