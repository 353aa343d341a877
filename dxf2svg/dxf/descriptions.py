"""
DXF Descriptions - Łączenie opisów tekstowych z obiektami rysunku
=================================================================
Tekst opisu i opisywany obiekt są w DXF niezależnymi entities.
Każdy opis dostaje najbliższy (po punktach zakotwiczenia) wolny obiekt.
"""

import logging
from typing import List, NamedTuple, Optional, Sequence

from ..exceptions import DescriptionCountMismatchError
from .entities import DXFEntity, EntityType
from .geometry import ORIGIN, Point, distance

logger = logging.getLogger(__name__)


class AnnotatedEntity(NamedTuple):
    """Obiekt graficzny z przypisanym opisem (None = brak opisu)"""
    description: Optional[str]
    entity: DXFEntity


def entity_anchor(entity: DXFEntity) -> Optional[Point]:
    """Punkt wstawienia tekstu albo środek bounding boxa, None bez geometrii"""
    if entity.entity_type == EntityType.TEXT:
        return entity.insert
    bounds = entity.bounds
    if bounds is None:
        return None
    return bounds.center


def associate_descriptions(entities: Sequence[DXFEntity]) -> List[AnnotatedEntity]:
    """
    Przypisz opisy do obiektów graficznych metodą najbliższego sąsiada.

    Args:
        entities: Entities w kolejności rysowania

    Returns:
        Bez opisów: wszystkie obiekty graficzne w kolejności wejścia z None.
        Z opisami: jedna para na opis, w kolejności opisów.

    Raises:
        DescriptionCountMismatchError: liczba opisów != liczba obiektów
    """
    graphical = []
    descriptions = []

    for entity in entities:
        anchor = entity_anchor(entity)
        if entity.entity_type == EntityType.TEXT:
            if anchor != ORIGIN:
                descriptions.append((anchor, entity.text))
            else:
                logger.debug(f"Skipping description at origin: {entity.text!r}")
        elif anchor is None:
            logger.debug(f"Skipping {entity.entity_type.value} {entity.handle} without extents")
        else:
            graphical.append((anchor, entity))

    if not descriptions:
        return [AnnotatedEntity(None, entity) for _, entity in graphical]

    if len(descriptions) != len(graphical):
        raise DescriptionCountMismatchError(len(descriptions), len(graphical))

    claimed = [False] * len(graphical)
    result: List[AnnotatedEntity] = []
    for point, text in descriptions:
        best_index = None
        best_distance = float('inf')
        for i, (anchor, _) in enumerate(graphical):
            if claimed[i]:
                continue
            d = distance(anchor, point)
            if d < best_distance:
                best_distance = d
                best_index = i

        if best_index is None:
            continue
        claimed[best_index] = True
        result.append(AnnotatedEntity(text, graphical[best_index][1]))

    logger.debug(f"Associated {len(result)} descriptions with graphical entities")
    return result


# Eksporty
__all__ = [
    'AnnotatedEntity',
    'entity_anchor',
    'associate_descriptions',
]
