"""
Scenario save format.

A save is a line-oriented text blob:

```
Island Survey          <- name
Width:6                <- Width/Height/Seed, -1 means "use 5"
Height:5
Seed:42
======                 <- exactly `width` '=' characters
LLLLOO                 <- `height` rows of terrain codes, `width` long each
LSSLOO
LLMLOO
LLLLLO
LLLLLO
======
User-0,0-ana           <- zero or more entity lines until end of input
Flora-SMALL-1,1
Fauna-LARGE-5,0-OCEAN
```

Decoding is a strict state machine (NAME -> WIDTH -> HEIGHT -> SEED ->
separator -> MAP rows -> separator -> ENTITIES). Any violation fails the whole
parse with a single BadSaveError; no partial scenario is ever returned.
Encoding is the exact inverse, joined with newlines and without a trailing
newline.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional, TextIO, Union

from .environment import Position, TileKind, parse_int
from .errors import BadSaveError, OutOfBoundsError
from .scenario import MIN_SIZE, Scenario
from .schemas import Entity, Fauna, Flora, Size, User

SEPARATOR_CHAR = "="


class _State(Enum):
    NAME = "name"
    WIDTH = "width"
    HEIGHT = "height"
    SEED = "seed"
    HEADER_SEPARATOR = "header separator"
    MAP = "map"
    MAP_SEPARATOR = "map separator"
    ENTITIES = "entities"


_HEADER_KEYS = {
    _State.WIDTH: "Width",
    _State.HEIGHT: "Height",
    _State.SEED: "Seed",
}


def _parse_header(line: str, key: str) -> int:
    """Parse a ``Key:Integer`` line; -1 is replaced with the default of 5."""

    if line.count(":") != 1:
        raise BadSaveError(f"Expected '{key}:<integer>' with exactly one ':', got {line!r}")
    found_key, raw_value = line.split(":")
    if found_key != key:
        raise BadSaveError(f"Expected key {key!r}, got {found_key!r}")
    try:
        value = parse_int(raw_value)
    except ValueError:
        raise BadSaveError(f"{key} value {raw_value!r} is not an integer") from None
    if value < -1:
        raise BadSaveError(f"{key} value {value} is negative")
    return MIN_SIZE if value == -1 else value


def _parse_size(token: str) -> Size:
    try:
        return Size[token]
    except KeyError:
        raise BadSaveError(f"Unknown size {token!r}") from None


def _parse_habitat(token: str) -> TileKind:
    try:
        return TileKind[token]
    except KeyError:
        raise BadSaveError(f"Unknown habitat {token!r}") from None


def decode_entity(line: str) -> Entity:
    """Decode one entity line (``User-x,y-name``, ``Flora-SIZE-x,y`` or
    ``Fauna-SIZE-x,y-HABITAT``).

    Raises:
        BadSaveError: On an unknown leading token, the wrong number of
            hyphens, or any invalid field.
    """

    components = line.split("-")
    hyphens = line.count("-")
    tag = components[0]

    if tag == "User":
        if hyphens != 2:
            raise BadSaveError(f"User entries need exactly 2 hyphens: {line!r}")
        position = Position.decode(components[1])
        name = components[2]
        if not name.strip():
            raise BadSaveError("User entries need a non-blank name")
        return User(position=position, name=name)

    if tag == "Flora":
        if hyphens != 2:
            raise BadSaveError(f"Flora entries need exactly 2 hyphens: {line!r}")
        return Flora(size=_parse_size(components[1]), position=Position.decode(components[2]))

    if tag == "Fauna":
        if hyphens != 3:
            raise BadSaveError(f"Fauna entries need exactly 3 hyphens: {line!r}")
        # Fauna rejects habitats other than LAND/OCEAN with a ValidationError,
        # which the scenario decoder turns into a BadSaveError.
        return Fauna(
            size=_parse_size(components[1]),
            position=Position.decode(components[2]),
            habitat=_parse_habitat(components[3]),
        )

    raise BadSaveError(f"Unknown entity type {tag!r}")


class _ScenarioDecoder:
    """Consumes save lines one at a time, advancing through ``_State``."""

    def __init__(self) -> None:
        self.state = _State.NAME
        self.name: Optional[str] = None
        self.header: Dict[_State, int] = {}
        self.scenario: Optional[Scenario] = None
        self.terrain: List[TileKind] = []
        self._handlers: Dict[_State, Callable[[str], None]] = {
            _State.NAME: self._read_name,
            _State.WIDTH: self._read_header,
            _State.HEIGHT: self._read_header,
            _State.SEED: self._read_header,
            _State.HEADER_SEPARATOR: self._read_separator,
            _State.MAP: self._read_map_row,
            _State.MAP_SEPARATOR: self._read_separator,
            _State.ENTITIES: self._read_entity,
        }

    @property
    def width(self) -> int:
        return self.header[_State.WIDTH]

    @property
    def height(self) -> int:
        return self.header[_State.HEIGHT]

    def feed(self, line: str) -> None:
        self._handlers[self.state](line)

    def finish(self) -> Scenario:
        if self.state is not _State.ENTITIES or self.scenario is None:
            raise BadSaveError(f"Save ended early, expected {self.state.value}")
        return self.scenario

    def _read_name(self, line: str) -> None:
        if not line.strip():
            raise BadSaveError("Scenario name must not be blank")
        self.name = line
        self.state = _State.WIDTH

    def _read_header(self, line: str) -> None:
        if not line.strip():
            raise BadSaveError(f"Missing {_HEADER_KEYS[self.state]} line")
        self.header[self.state] = _parse_header(line, _HEADER_KEYS[self.state])

        if self.state is _State.WIDTH:
            self.state = _State.HEIGHT
        elif self.state is _State.HEIGHT:
            self.state = _State.SEED
        else:
            try:
                self.scenario = Scenario(
                    self.name, self.width, self.height, self.header[_State.SEED]
                )
            except ValueError as exc:
                raise BadSaveError(str(exc)) from None
            self.state = _State.HEADER_SEPARATOR

    def _read_separator(self, line: str) -> None:
        if line != SEPARATOR_CHAR * self.width:
            raise BadSaveError(f"Expected a separator of {self.width} '{SEPARATOR_CHAR}'")
        if self.state is _State.HEADER_SEPARATOR:
            self.state = _State.MAP
        else:
            self.state = _State.ENTITIES

    def _read_map_row(self, line: str) -> None:
        if len(line) != self.width:
            raise BadSaveError(f"Map rows must be {self.width} characters, got {len(line)}")
        self.terrain.extend(TileKind.decode(code) for code in line)
        if len(self.terrain) == self.width * self.height:
            self.scenario.set_terrain(self.terrain)
            self.state = _State.MAP_SEPARATOR

    def _read_entity(self, line: str) -> None:
        self.scenario.place(decode_entity(line))


def decode_scenario(source: Union[str, TextIO]) -> Scenario:
    """Build a Scenario from a save blob (string or readable text stream).

    Raises:
        BadSaveError: On any grammar or placement violation. ``line_number``
            points at the offending line when there is one.
    """

    text = source if isinstance(source, str) else source.read()
    decoder = _ScenarioDecoder()

    for line_number, line in enumerate(text.splitlines(), start=1):
        try:
            decoder.feed(line)
        except BadSaveError as exc:
            raise BadSaveError(exc.reason, line_number=line_number) from exc
        except (ValueError, OutOfBoundsError) as exc:
            # ValueError also covers pydantic ValidationError and placement rules.
            raise BadSaveError(str(exc), line_number=line_number) from exc

    return decoder.finish()


def encode_scenario(scenario: Scenario) -> str:
    """Serialize ``scenario``; the exact inverse of :func:`decode_scenario`."""

    grid = scenario.grid
    separator = SEPARATOR_CHAR * scenario.width
    lines = [
        scenario.name,
        f"Width:{scenario.width}",
        f"Height:{scenario.height}",
        f"Seed:{scenario.seed}",
        separator,
    ]
    lines.extend("".join(tile.kind.code for tile in row) for row in grid.rows())
    lines.append(separator)
    lines.extend(entity.encode() for _, entity in grid.occupied())
    return "\n".join(lines)
