"""The fixed catalog of jokes served by the API."""

from typing import Callable, Iterator

from pydantic import BaseModel, ConfigDict, field_validator


class JokeCatalogError(Exception):
    """Joke catalog error."""


class JokeCatalog(BaseModel):
    """An immutable, ordered set of candidate jokes."""

    model_config = ConfigDict(frozen=True)

    jokes: tuple[str, ...]

    @field_validator("jokes")
    @classmethod
    def _not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise JokeCatalogError("Joke catalog must contain at least one joke")
        return value

    def __len__(self) -> int:
        return len(self.jokes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.jokes)

    def __contains__(self, joke: object) -> bool:
        return joke in self.jokes

    def __getitem__(self, index: int) -> str:
        return self.jokes[index]

    def pick(self, random_source: Callable[[], float]) -> str:
        """
        Pick one joke using a uniform draw from random_source.

        Args:
            random_source: Zero-argument callable returning a float in [0, 1)

        Returns:
            The joke at index floor(draw * len(catalog))
        """
        draw = random_source()
        if not 0.0 <= draw < 1.0:
            raise JokeCatalogError(f"Random source returned {draw!r}, expected a value in [0, 1)")
        # Float rounding can push draw * n up to n for draws just below 1
        index = min(int(draw * len(self.jokes)), len(self.jokes) - 1)
        return self.jokes[index]


CHUCK_NORRIS_JOKES = JokeCatalog(jokes=(
    "Chuck Norris doesn't read books. He stares them down until he gets the information he wants.",
    "Time waits for no man. Unless that man is Chuck Norris.",
    "If you spell Chuck Norris in Scrabble, you win. Forever.",
    "Chuck Norris can divide by zero.",
    "When Chuck Norris does a pushup, he isn't lifting himself up, he's pushing the Earth down.",
    "Chuck Norris is the reason why Waldo is hiding.",
    "Chuck Norris counted to infinity... twice.",
    "Chuck Norris doesn't wear a watch. HE decides what time it is.",
    "Chuck Norris can slam a revolving door.",
    "Chuck Norris doesn't call the wrong number. You answer the wrong phone.",
    "Chuck Norris can delete the Recycling Bin.",
    "Chuck Norris can win a game of Connect Four in only three moves.",
    "When the Boogeyman goes to sleep every night, he checks his closet for Chuck Norris.",
    "Chuck Norris once kicked a horse in the chin. Its descendants are now called giraffes.",
))
