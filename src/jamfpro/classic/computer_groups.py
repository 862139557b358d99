r"""Classic API computer groups (``/computergroups``)."""

from __future__ import annotations

__all__ = [
    "AndOr",
    "ComputerGroup",
    "ComputerGroupComputer",
    "ComputerGroupComputers",
    "ComputerGroupCriteria",
    "ComputerGroupCriterion",
    "ComputerGroupsService",
    "ListComputerGroup",
    "ListComputerGroups",
    "SearchType",
]

from dataclasses import dataclass, field
from enum import Enum

from jamfpro.classic.common import ClassicService, Site


class AndOr(str, Enum):
    AND = "and"
    OR = "or"


class SearchType(str, Enum):
    IS = "is"
    IS_NOT = "is not"
    HAS = "has"
    DOES_NOT_HAVE = "does not have"
    BEFORE = "before (yyyy-mm-dd)"
    AFTER = "after (yyyy-mm-dd)"
    MORE_THAN_X_DAYS_AGO = "more than x days ago"
    LESS_THAN_X_DAYS_AGO = "less than x days ago"
    LIKE = "like"
    NOT_LIKE = "not like"
    GREATER_THAN = "greater than"
    LESS_THAN = "less than"
    GREATER_THAN_OR_EQUAL = "greater than or equal"
    LESS_THAN_OR_EQUAL = "less than or equal"
    MATCHES_REGEX = "matches regex"
    DOES_NOT_MATCH_REGEX = "does not match regex"


@dataclass
class ComputerGroupCriterion:
    name: str | None = None
    priority: int | None = None
    and_or: AndOr | None = None
    search_type: SearchType | None = None
    value: str | None = None
    opening_paren: bool | None = None
    closing_paren: bool | None = None


@dataclass
class ComputerGroupCriteria:
    size: int | None = None
    criterion: list[ComputerGroupCriterion] | None = None


@dataclass
class ComputerGroupComputer:
    id: int | None = None
    name: str | None = None
    mac_address: str | None = None
    alt_mac_address: str | None = None
    serial_number: str | None = None


@dataclass
class ComputerGroupComputers:
    size: int | None = None
    computers: list[ComputerGroupComputer] | None = field(
        default=None, metadata={"xml": "computer"}
    )


@dataclass
class ComputerGroup:
    id: int | None = None
    name: str | None = None
    is_smart: bool | None = None
    site: Site | None = None
    criteria: ComputerGroupCriteria | None = None
    computers: ComputerGroupComputers | None = None


@dataclass
class ListComputerGroup:
    id: int | None = None
    name: str | None = None
    is_smart: bool | None = None


@dataclass
class ListComputerGroups:
    size: int | None = None
    computer_groups: list[ListComputerGroup] | None = field(
        default=None, metadata={"xml": "computer_group"}
    )


class ComputerGroupsService(ClassicService[ComputerGroup, ListComputerGroups]):
    r"""Static and smart computer groups.

    Example:
        ```pycon
        >>> from jamfpro.classic import ClassicClient
        >>> from jamfpro.classic.computer_groups import ComputerGroup
        >>> client = ClassicClient("https://example.jamfcloud.com")
        >>> group_id = client.computer_groups.create(
        ...     ComputerGroup(name="Staff", is_smart=False)
        ... )  # doctest: +SKIP

        ```
    """

    path = "/computergroups"
    root_tag = "computer_group"
    model = ComputerGroup
    list_model = ListComputerGroups

    @staticmethod
    def _check(operation: str, verb: str, group: ComputerGroup | None) -> ComputerGroup:
        if group is None:
            msg = f"ComputerGroupsService.{operation}(): cannot {verb} None computer group"
            raise ValueError(msg)
        if group.name is None:
            msg = f"ComputerGroupsService.{operation}(): cannot {verb} computer group with None name"
            raise ValueError(msg)
        if group.is_smart is None:
            msg = f"ComputerGroupsService.{operation}(): cannot {verb} computer group with None is_smart"
            raise ValueError(msg)
        return group

    def create(self, group: ComputerGroup) -> int | None:
        """Create a computer group and return its ID.

        Raises:
            ValueError: If ``name`` or ``is_smart`` is missing.
        """
        return self._create(self._check("create", "create", group))

    def get(self, group_id: int) -> ComputerGroup:
        return self._get(group_id)

    def list(self) -> ListComputerGroups:
        return self._list()

    def update(self, group: ComputerGroup) -> None:
        """Replace a computer group, identified by its ``id``.

        Raises:
            ValueError: If ``id``, ``name`` or ``is_smart`` is missing.
        """
        self._check("update", "update", group)
        if group.id is None:
            msg = "ComputerGroupsService.update(): cannot update computer group with None id"
            raise ValueError(msg)
        self._update(group.id, group)

    def delete(self, group_id: int) -> None:
        self._delete(group_id)
