from routable.app.protocols import LineFinder
from routable.domain.entities.geography import Feature, Line
from routable.domain.geometry.normalize import select_line


def find_line(feature: Feature) -> Line | None:
    # first match in caller order, nested collections are not searched
    return select_line(feature.geometry)


class FirstLineFinder(LineFinder):
    def find_line(self, feature: Feature) -> Line | None:
        return find_line(feature)
