# supergrid/visualization/base.py

"""
Chart configuration and shared style constants.

:class:`ChartTechs` is the immutable palette/label/display-order table of
technologies, loaded from ``charttechs.yaml``. It is passed explicitly to
the analyzer and the scenario comparator; :meth:`ChartTechs.default`
returns the packaged table.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Sequence, Tuple

import yaml

DEFAULT_CHARTTECHS_PATH = os.path.join(
    os.path.dirname(os.path.dirname(__file__)), "charttechs.yaml"
)

RGB = Tuple[float, float, float]

#: Colour of unused class headroom in utilization charts
HEADROOM_COLOR: RGB = (0.9, 0.9, 0.9)

#: Default matplotlib rcParams overrides applied by every chart
DEFAULT_RC: Dict[str, Any] = {
    'font.size': 14,
    'axes.titlesize': 16,
    'legend.fontsize': 12,
    'text.color': 'black',
    'axes.labelcolor': 'black',
    'xtick.color': 'black',
    'ytick.color': 'black',
    'font.family': 'sans-serif',
}


@dataclass(frozen=True)
class RegionGroup:
    """A named, fixed block ``REGION[start:stop]`` of the region list."""

    name: str
    start: int
    stop: int
    aliases: Tuple[str, ...] = ()

    @property
    def indexes(self) -> range:
        return range(self.start, self.stop)


@dataclass(frozen=True)
class ChartTechs:
    """
    Palette, labels and display order of technologies.

    Attributes
    ----------
    palette : mapping of str to RGB
        Technology -> colour, components in 0..1.
    labels : mapping of str to str
        Technology -> legend label.
    displaytechs : tuple of str
        Stacking order of technologies in charts.
    classcharts : tuple of str
        Technologies drawn in the class utilization small multiples.
    halfclasstechs : tuple of str
        Technologies of which only the first half of the class set is drawn.
    existingtech, existingclass : str
        Pre-existing generation subtracted from the levelized system cost
        denominator.
    totalaliases : tuple of str
        Region selectors meaning all regions.
    regiongroups : tuple of RegionGroup
        Fixed region blocks.
    grouplayout : int
        Number of regions the region blocks refer to.
    """

    palette: Mapping[str, RGB]
    labels: Mapping[str, str]
    displaytechs: Tuple[str, ...]
    classcharts: Tuple[str, ...] = ()
    halfclasstechs: Tuple[str, ...] = ()
    existingtech: str = "hydro"
    existingclass: str = "x0"
    totalaliases: Tuple[str, ...] = ("TOTAL",)
    regiongroups: Tuple[RegionGroup, ...] = ()
    grouplayout: int = 0

    def __post_init__(self):
        object.__setattr__(self, "palette", MappingProxyType(dict(self.palette)))
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))
        for name in ("displaytechs", "classcharts", "halfclasstechs",
                     "totalaliases", "regiongroups"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        unknown = [k for k in self.displaytechs if k not in self.labels or k not in self.palette]
        if unknown:
            raise ValueError(f"displaytechs without label or colour: {unknown}")

    @classmethod
    def from_yaml(cls, path: str = DEFAULT_CHARTTECHS_PATH) -> "ChartTechs":
        """
        Load a chart configuration file.

        Raises
        ------
        ValueError
            If a required section is missing.
        """
        with open(path, "r") as f:
            config = yaml.safe_load(f)
        for section in ("technologies", "displaytechs"):
            if section not in (config or {}):
                raise ValueError(f"Chart configuration {path} has no '{section}' section")

        techs = config["technologies"]
        groups = config.get("regiongroups") or {}
        existing = config.get("existing") or {}
        return cls(
            palette={k: tuple(c / 255 for c in v["color"]) for k, v in techs.items()},
            labels={k: v["label"] for k, v in techs.items()},
            displaytechs=config["displaytechs"],
            classcharts=config.get("classcharts", ()),
            halfclasstechs=config.get("halfclasstechs", ()),
            existingtech=existing.get("tech", "hydro"),
            existingclass=existing.get("class", "x0"),
            totalaliases=config.get("totalaliases", ("TOTAL",)),
            regiongroups=[
                RegionGroup(g["name"], g["start"], g["stop"], tuple(g.get("aliases", ())))
                for g in groups.get("groups", ())
            ],
            grouplayout=groups.get("layout_size", 0),
        )

    @classmethod
    def default(cls) -> "ChartTechs":
        """The packaged configuration (loaded once)."""
        return _default_charttechs()

    def label(self, tech: str) -> str:
        try:
            return self.labels[tech]
        except KeyError:
            raise KeyError(
                f"No chart label for technology '{tech}'; add it to charttechs.yaml"
            ) from None

    def color(self, tech: str) -> RGB:
        try:
            return self.palette[tech]
        except KeyError:
            raise KeyError(
                f"No chart colour for technology '{tech}'; add it to charttechs.yaml"
            ) from None

    def check(self, techs: Sequence[str]) -> None:
        """Raise ``KeyError`` unless every technology in *techs* can be charted."""
        missing = [k for k in techs if k not in self.displaytechs]
        if missing:
            raise KeyError(
                f"Technologies {missing} have no chart palette/label entry; "
                f"extend charttechs.yaml"
            )

    def displayorder(self, techs: Sequence[str]) -> List[int]:
        """
        Positions in *techs* sorted by display order.

        Examples
        --------
        >>> ChartTechs.default().displayorder(['wind', 'coal', 'battery'])
        [1, 0, 2]
        """
        self.check(techs)
        techs = list(techs)
        return [techs.index(d) for d in self.displaytechs if d in techs]

    def ordered(self, techs: Sequence[str]) -> List[str]:
        """*techs* in display order."""
        return [techs[i] for i in self.displayorder(techs)]

    def techlabels(self, techs: Sequence[str]) -> List[str]:
        """Legend labels of *techs* in display order."""
        return [self.label(k) for k in self.ordered(techs)]

    def colors(self, techs: Sequence[str]) -> List[RGB]:
        """Colours of *techs* in display order."""
        return [self.color(k) for k in self.ordered(techs)]

    def group_for(self, selector: str):
        """The region group aliased by *selector*, or ``None``."""
        for group in self.regiongroups:
            if selector in group.aliases or selector == group.name:
                return group
        return None


@lru_cache(maxsize=1)
def _default_charttechs() -> ChartTechs:
    return ChartTechs.from_yaml(DEFAULT_CHARTTECHS_PATH)


def apply_style() -> None:
    """Apply the default matplotlib rcParams."""
    import matplotlib.pyplot as plt
    plt.rcParams.update(DEFAULT_RC)


def strip_spines(ax, keep: Sequence[str] = ('bottom', 'left')) -> None:
    """Hide axis spines except those in *keep*."""
    for spine in ('top', 'right', 'left', 'bottom'):
        ax.spines[spine].set_visible(spine in keep)
