from typing import NamedTuple


class StreetRequirement(NamedTuple):
    deal    : int
    place   : int
    discard : int

    @property
    def text(self) -> str:
        if self.discard == 0:
            return f'Place {self.place}'

        return f'Place {self.place}, discard {self.discard}'


STREET_REQUIREMENTS = {
    1: StreetRequirement(deal=5, place=5, discard=0),
    2: StreetRequirement(deal=3, place=2, discard=1),
    3: StreetRequirement(deal=3, place=2, discard=1),
    4: StreetRequirement(deal=3, place=2, discard=1),
    5: StreetRequirement(deal=3, place=2, discard=1),
}

FIRST_STREET = min(STREET_REQUIREMENTS)
FINAL_STREET = max(STREET_REQUIREMENTS)
