"""Shared functionality for tally file I/O. Internal."""

import dataclasses
import typing
from typing import Any, Callable, Iterable, TextIO, Tuple, Optional


class ParseError(Exception):
    """An input that is invalid according to the given format was detected."""
    pass


@dataclasses.dataclass
class TallySetup:
    """A container for data returnable from a tally file."""
    votes: Any
    n_seats: Optional[int] = None
    system: Optional[str] = None
    election_name: Optional[str] = None


def loaders(line_loader: Callable[..., TallySetup]
            ) -> Tuple[Callable[..., TallySetup], Callable[..., TallySetup]]:
    """Create load() and loads() functions from a function consuming lines."""
    return_annot = typing.get_type_hints(line_loader).get('return')
    if return_annot is None:
        return_annot = Any

    def load(file: TextIO, **kwargs) -> return_annot:
        return line_loader(file, **kwargs)

    def loads(text: str, **kwargs) -> return_annot:
        return line_loader(iter(text.split('\n')), **kwargs)

    return load, loads


def dumpers(line_dumper: Callable[..., Iterable[str]]
            ) -> Tuple[Callable[..., None], Callable[..., str]]:
    """Create dump() and dumps() functions from a line generator function."""

    def dump(file: TextIO, *args, **kwargs) -> None:
        for line in line_dumper(*args, **kwargs):
            if not line.endswith('\n'):
                line += '\n'
            file.write(line)

    def dumps(*args, **kwargs) -> str:
        return ''.join(
            line + ('' if line.endswith('\n') else '\n')
            for line in line_dumper(*args, **kwargs)
        )

    return dump, dumps
