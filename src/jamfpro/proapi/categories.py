r"""Jamf Pro API categories (``/v1/categories``)."""

from __future__ import annotations

__all__ = ["CategoriesService", "Category", "ListCategory"]

from pydantic import Field

from jamfpro.core.uri import Uri
from jamfpro.proapi.common import CreatedResource, ListOptions, ProModel, ProService, encode_model


class Category(ProModel):
    id: str | None = None
    name: str | None = None
    priority: int | None = None


class ListCategory(ProModel):
    total_count: int | None = None
    categories: list[Category] | None = Field(default=None, alias="results")


class CategoriesService(ProService):
    r"""Categories of the Jamf Pro API.

    Example:
        ```pycon
        >>> from jamfpro.proapi import ListOptions, ProClient
        >>> from jamfpro.proapi.categories import Category
        >>> client = ProClient("https://example.jamfcloud.com")
        >>> category_id = client.categories.create(Category(name="Apps", priority=9))  # doctest: +SKIP
        >>> page = client.categories.list(ListOptions(sort=["name:asc"]))  # doctest: +SKIP

        ```
    """

    path = "/v1/categories"

    def create(self, category: Category) -> str | None:
        """Create a category and return its ID.

        Raises:
            ValueError: If ``name`` or ``priority`` is missing.
        """
        if category.name is None:
            msg = "CategoriesService.create(): cannot create category with None name"
            raise ValueError(msg)
        if category.priority is None:
            msg = "CategoriesService.create(): cannot create category with None priority"
            raise ValueError(msg)
        response = self.client.post(Uri(self.path), (201,), body=encode_model(category))
        return self._decode(response, CreatedResource).id

    def get(self, category_id: str) -> Category:
        return self._decode(self.client.get(Uri(f"{self.path}/{category_id}"), (200,)), Category)

    def list(self, options: ListOptions | None = None) -> ListCategory:
        params = (options or ListOptions()).to_params()
        return self._decode(self.client.get(Uri(self.path, params), (200,)), ListCategory)

    def update(self, category: Category) -> Category:
        """Replace a category and return it as stored by the server.

        Raises:
            ValueError: If ``id``, ``name`` or ``priority`` is missing.
        """
        for name in ("id", "name", "priority"):
            if getattr(category, name) is None:
                msg = f"CategoriesService.update(): cannot update category with None {name}"
                raise ValueError(msg)
        response = self.client.put(
            Uri(f"{self.path}/{category.id}"), (200,), body=encode_model(category)
        )
        return self._decode(response, Category)

    def delete(self, category_id: str) -> None:
        self._discard(self.client.delete(Uri(f"{self.path}/{category_id}"), (204,)))

    def delete_multiple(self, category_ids: list[str]) -> None:
        body = encode_model(_IDs(ids=list(category_ids)))
        self._discard(self.client.post(Uri(f"{self.path}/delete-multiple"), (204,), body=body))


class _IDs(ProModel):
    ids: list[str] | None = None
