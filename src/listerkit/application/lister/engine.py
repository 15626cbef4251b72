"""Application lister – ListEngine.

The engine owns a declarative list definition (filters, sorters, elements),
binds it to a query, reads user input from a :class:`ListRequest` and
produces one page of results::

    engine = ListEngine("books", repository=repo)
    engine.bind_forms(ParamFormBinder(), "lister_filters_books")
    engine.add_field("title", "Title", sort=True, filter_type="text")
    engine.apply(ListRequest(params))
    rows = engine.get_hydrated_elements()

Every engine without custom elements can be turned into a JSON-friendly
snapshot with :meth:`ListEngine.serialize` and rebuilt with
:meth:`ListEngine.restore`.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, NoReturn

from listerkit.application.elements import Element, ElementBag, Extractor
from listerkit.application.filters import ChoiceValues, Filter, FilterBag, FilterKind, FilterType
from listerkit.application.lister.options import DEFAULT_MAX_LINKS, resolve_custom_options
from listerkit.application.lister.snapshot import ListSnapshot
from listerkit.application.pagination import Pager
from listerkit.application.ports.forms import FieldKind, Form, FormBinder, FormField
from listerkit.application.ports.query import LIKE_ESCAPE, Query, QuerySnapshot, Repository
from listerkit.application.ports.request import ListRequest
from listerkit.application.ports.routing import Router
from listerkit.application.ports.session import SessionStore
from listerkit.application.sorters import SortDirection, Sorter, SorterBag
from listerkit.kernel.errors import ListerError, SerializeError
from listerkit.kernel.naming import new_list_id
from listerkit.observability.logging import get_logger

_log = get_logger(__name__)

LIST_ID_FIELD = "_lister_id"
SUBMIT_BUTTON = "submit"
RESET_BUTTON = "reset"
PAGE_PARAMETER_PREFIX = "p_"

DEFAULT_FILTER_LAYOUT = "listerkit/filter.html"
DEFAULT_LIST_LAYOUT = "listerkit/table.html"
DEFAULT_ELEMENT_LAYOUT = "listerkit/table_element.html"
DEFAULT_PAGINATION_LAYOUT = "listerkit/pagination.html"

_FIELD_KINDS = {
    FilterKind.TEXT: FieldKind.TEXT,
    FilterKind.CHOICE: FieldKind.CHOICE,
    FilterKind.CHECKBOX: FieldKind.CHECKBOX,
    FilterKind.RADIO: FieldKind.RADIO,
}
_SORT_CLASSES = {SortDirection.ASC: "sort-asc", SortDirection.DESC: "sort-desc"}


def like_pattern(text: str) -> str:
    """Turn user input into a ``LIKE`` pattern.

    Literal ``%`` and ``_`` are escaped. Input without ``*`` matches as a
    substring; otherwise every ``*`` becomes a ``%`` wildcard.
    """
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    if "*" in escaped:
        return escaped.replace("*", "%")
    return f"%{escaped}%"


def _is_blank(value: Any) -> bool:
    return value is None or value is False or (isinstance(value, (str, list, tuple, dict)) and not value)


class ListEngine:
    """Stateful list: definition, user choices, query and current page.

    An engine created without an ``id`` gets a random one and is not
    persisted into sessions.
    """

    def __init__(
        self,
        id: str = "",  # noqa: A002
        query: Query | None = None,
        repository: Repository | None = None,
    ) -> None:
        self.persist = bool(id)
        self._id = id or new_list_id()
        self.filters = FilterBag()
        self.sorters = SorterBag()
        self.elements = ElementBag()

        self._query: Query | None = None
        self._external_query: Query | None = None
        self._repository = repository
        self._pending_query: QuerySnapshot | None = None
        self._pending_external: QuerySnapshot | None = None
        self._pager: Pager | None = None

        self._per_page = 0
        self.current_page = 1
        self.dynamic = True
        self.filter_layout = DEFAULT_FILTER_LAYOUT
        self.list_layout = DEFAULT_LIST_LAYOUT
        self.element_layout = DEFAULT_ELEMENT_LAYOUT
        self.pagination_layout = DEFAULT_PAGINATION_LAYOUT
        self.translation_domain = "default"
        self.session_key: str | None = None

        self._form_binder: FormBinder | None = None
        self._filter_form_name = ""
        self._sorter_form_name = ""
        self._csrf = False
        self._session: SessionStore | None = None
        self._router: Router | None = None
        self._filter_form: Form | None = None
        self._empty_filter_form: Form | None = None

        self._max_links = DEFAULT_MAX_LINKS
        self._custom_options = resolve_custom_options({}, self._id)
        if query is not None:
            self.set_query(query)

    # ------------------------------------------------------------------
    # Identity and settings
    # ------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def page_parameter_name(self) -> str:
        """Name of the query-string parameter carrying the requested page."""
        return f"{PAGE_PARAMETER_PREFIX}{self._id}"

    @property
    def per_page(self) -> int:
        return self._per_page

    @per_page.setter
    def per_page(self, value: int) -> None:
        self._per_page = max(int(value), 0)

    @property
    def custom_options(self) -> dict[str, Any]:
        return dict(self._custom_options)

    @custom_options.setter
    def custom_options(self, options: Mapping[str, Any]) -> None:
        self._custom_options = resolve_custom_options(options, self._id, self._max_links)

    def set_default_max_links(self, max_links: int) -> None:
        """Change the ``max_links`` default and re-resolve the custom options."""
        self._max_links = max_links
        overrides = {k: v for k, v in self._custom_options.items() if k != "max_links"}
        self._custom_options = resolve_custom_options(overrides, self._id, max_links)

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    def set_query(self, query: Query) -> "ListEngine":
        """Use *query* as working query; a clone is kept as the immutable base."""
        self._query = query
        self._external_query = query.clone()
        self._pending_query = self._pending_external = None
        return self

    def get_query(self, clone: bool = True) -> Query | None:
        if self._query is None:
            return None
        return self._query.clone() if clone else self._query

    def get_external_query(self) -> Query | None:
        return self._external_query

    @property
    def repository(self) -> Repository | None:
        return self._repository

    @repository.setter
    def repository(self, repository: Repository | None) -> None:
        self._repository = repository

    def bind_forms(
        self,
        binder: FormBinder,
        filter_form_name: str,
        sorter_form_name: str | None = None,
        csrf: bool = False,
    ) -> "ListEngine":
        self._form_binder = binder
        self._filter_form_name = filter_form_name
        self._sorter_form_name = sorter_form_name or f"{filter_form_name}_sorter"
        self._csrf = csrf
        self._filter_form = self._empty_filter_form = None
        return self

    def set_router(self, router: Router | None) -> "ListEngine":
        self._router = router
        return self

    def get_pager(self) -> Pager | None:
        return self._pager

    # ------------------------------------------------------------------
    # Definition
    # ------------------------------------------------------------------

    def add_field(
        self,
        name: str,
        label: str,
        sort: bool = False,
        filter_type: FilterType | str = "",
        filter_method: str = "",
        filter_value: Any = None,
        filter_values: ChoiceValues = (),
        sorter_method: str = "",
        sorter_value: str | None = None,
        element_method: str = "",
        element_callable: Extractor | None = None,
        element_data: Any = None,
    ) -> "ListEngine":
        """Declare an element and, optionally, a sorter and a filter sharing *name*."""
        self.add_element(Element(name, label, element_method, element_callable, element_data))
        if sort:
            self.add_sorter(Sorter(name, label, sorter_method, sorter_value))
        if filter_type:
            self.add_filter(Filter(filter_type, name, label, filter_method, filter_value, filter_values))
        return self

    def add_filter(self, filter_: Filter, overwrite: bool = False) -> "ListEngine":
        if overwrite or not self.has_filter(filter_):
            self.filters.set(filter_.name, filter_)
        return self

    def has_filter(self, name: str | Filter) -> bool:
        return self.filters.has(name.name if isinstance(name, Filter) else name)

    def get_filter(self, name: str) -> Filter | None:
        return self.filters.get(name)

    def remove_filter(self, name: str) -> "ListEngine":
        self.filters.remove(name)
        return self

    def set_filters(self, filters: FilterBag, overwrite: bool = False) -> "ListEngine":
        if overwrite:
            self.filters.replace(filters.all())
        else:
            for filter_ in filters:
                self.add_filter(filter_)
        return self

    def add_sorter(self, sorter: Sorter, overwrite: bool = False) -> "ListEngine":
        if overwrite or not self.has_sorter(sorter):
            self.sorters.set(sorter.name, sorter)
        return self

    def has_sorter(self, name: str | Sorter) -> bool:
        return self.sorters.has(name.name if isinstance(name, Sorter) else name)

    def get_sorter(self, name: str) -> Sorter | None:
        return self.sorters.get(name)

    def remove_sorter(self, name: str) -> "ListEngine":
        self.sorters.remove(name)
        return self

    def set_sorters(self, sorters: SorterBag, overwrite: bool = False) -> "ListEngine":
        if overwrite:
            self.sorters.replace(sorters.all())
        else:
            for sorter in sorters:
                self.add_sorter(sorter)
        return self

    def add_element(self, element: Element, overwrite: bool = False) -> "ListEngine":
        if overwrite or not self.has_element(element):
            self.elements.set(element.name, element)
        return self

    def has_element(self, name: str | Element) -> bool:
        return self.elements.has(name.name if isinstance(name, Element) else name)

    def get_element(self, name: str) -> Element | None:
        return self.elements.get(name)

    def remove_element(self, name: str) -> "ListEngine":
        self.elements.remove(name)
        return self

    def set_elements(self, elements: ElementBag, overwrite: bool = False) -> "ListEngine":
        if overwrite:
            self.elements.replace(elements.all())
        else:
            for element in elements:
                self.add_element(element)
        return self

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    def get_filter_form(self) -> Form | None:
        """The filter form built by the last :meth:`apply`, if any."""
        return self._filter_form

    def get_sorter_form(self, sorter: str | Sorter) -> Form | None:
        if self._form_binder is None:
            return None
        resolved = sorter if isinstance(sorter, Sorter) else self.sorters.get(sorter)
        if not isinstance(resolved, Sorter):
            raise ListerError(
                f"Cannot build sorter form because {sorter} does not exist.", list_id=self._id
            )
        direction = resolved.direction
        fields = [
            FormField(LIST_ID_FIELD, FieldKind.HIDDEN, data=self._id),
            FormField(
                resolved.name,
                FieldKind.SUBMIT,
                label=resolved.label,
                attrs={"class": _SORT_CLASSES.get(direction, "")},
                translation_domain=self.translation_domain,
            ),
        ]
        return self._form_binder.create_form(
            self._sorter_form_name,
            fields,
            action=self._form_action(),
            csrf=self._csrf,
            session=self._session,
        )

    def _form_action(self) -> str | None:
        if self.persist and self.dynamic and self._router is not None:
            options = self._custom_options
            return self._router.url_for(options["route"], options["params"])
        return None

    def _build_filter_form(self) -> bool:
        if self._form_binder is None or not len(self.filters):
            return False
        filled: list[FormField] = [FormField(LIST_ID_FIELD, FieldKind.HIDDEN, data=self._id)]
        empty: list[FormField] = [FormField(LIST_ID_FIELD, FieldKind.HIDDEN, data=self._id)]
        for filter_ in self.filters:
            kind = _FIELD_KINDS[filter_.resolved_kind()]
            choice = kind is FieldKind.CHOICE
            field = FormField(
                filter_.name,
                kind,
                label=filter_.label,
                data=filter_.value,
                choices=filter_.values if choice else {},
                multiple=choice and filter_.is_multiple(),
                expanded=choice and filter_.is_expanded(),
                translation_domain=self.translation_domain,
            )
            filled.append(field)
            empty.append(
                FormField(
                    field.name,
                    field.kind,
                    label=field.label,
                    choices=field.choices,
                    multiple=field.multiple,
                    expanded=field.expanded,
                    translation_domain=field.translation_domain,
                )
            )
        for buttons in (filled, empty):
            buttons.append(FormField(SUBMIT_BUTTON, FieldKind.SUBMIT, label="Apply"))
            buttons.append(FormField(RESET_BUTTON, FieldKind.SUBMIT, label="Clear"))
        action = self._form_action()
        self._filter_form = self._form_binder.create_form(
            self._filter_form_name, filled, action=action, csrf=self._csrf, session=self._session
        )
        self._empty_filter_form = self._form_binder.create_form(
            self._filter_form_name, empty, action=action, csrf=self._csrf, session=self._session
        )
        return True

    # ------------------------------------------------------------------
    # Request handling
    # ------------------------------------------------------------------

    def handle_request(self, request: ListRequest) -> bool:
        """Read filter values, a sorter click and the page number from *request*.

        Returns ``True`` when the filter form was submitted and valid.
        """
        handled = False
        form = self._filter_form
        if form is not None:
            form.handle_request(request)
            if form.is_submitted() and form.is_valid():
                clear = form.clicked_button() == RESET_BUTTON
                data = form.data()
                for filter_ in self.filters:
                    if filter_.name in data:
                        value = data[filter_.name]
                        filter_.value = None if clear or _is_blank(value) else value
                if clear:
                    self._filter_form = self._empty_filter_form
                handled = True

        for sorter in self.sorters:
            sorter_form = self.get_sorter_form(sorter)
            if sorter_form is None:
                break
            sorter_form.handle_request(request)
            if not (sorter_form.is_submitted() and sorter_form.is_valid()):
                continue
            clicked = sorter_form.clicked_button()
            if clicked is not None and self.has_sorter(clicked):
                self.sorters.get(clicked).flip()
                for other in self.sorters:
                    if other.name != clicked:
                        other.value = None
                break

        if handled:
            self.current_page = 1
        else:
            try:
                page = int(request.get(self.page_parameter_name, 1))
            except (TypeError, ValueError):
                page = 1
            self.current_page = max(1, page)
        return handled

    def apply(self, request: ListRequest, session: SessionStore | None = None) -> "ListEngine":
        """Run the whole pipeline: forms, request, query, pagination, persistence."""
        self._session = session
        self._custom_options = resolve_custom_options(self._custom_options, self._id, self._max_links)
        if not self._build_filter_form() and len(self.filters):
            self._fail("Cannot apply list when filters are defined and form is not built.")
        if not len(self.elements):
            self._fail("Cannot apply list when there are no defined elements.")
        if self._query is None and self._repository is None:
            self._fail("Cannot apply list without a query object or repository.")

        self.handle_request(request)
        self._query = self._rebuild_query()

        for filter_ in self.filters:
            value = filter_.value
            if filter_.is_default_method and filter_.type is FilterType.TEXT and value:
                filter_.value = like_pattern(str(value))
                try:
                    filter_.apply(self, ["LIKE"])
                finally:
                    filter_.value = value
            else:
                filter_.apply(self)
        for sorter in self.sorters:
            sorter.apply(self)

        pager = Pager(self._query, self._per_page)
        pager.page = self.current_page
        pager.init()
        self._pager = pager
        self.current_page = max(1, pager.page)
        _log.debug(
            "lister.applied",
            list_id=self._id,
            page=self.current_page,
            total=pager.total_results,
        )

        if session is not None and self.persist:
            from listerkit.application.lister.session import ListSessionRegistry

            ListSessionRegistry(self.session_key).store(session, self)
        return self

    def _rebuild_query(self) -> Query:
        if self._external_query is None and self._pending_external is not None and self._repository is not None:
            self._external_query = self._repository.restore_query(self._pending_external)
            self._pending_query = self._pending_external = None
        if self._external_query is not None:
            return self._external_query.clone()
        if self._repository is not None:
            return self._repository.create_query()
        return self._query.clear()  # type: ignore[union-attr]

    def _fail(self, message: str) -> NoReturn:
        raise ListerError(message, list_id=self._id)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def get_hydrated_elements(self, row: Any = None) -> list[Any]:
        """Detached element copies bound to *row*, or one list per page row."""
        if row is None:
            if self._pager is None:
                self._fail("List has not been applied yet.")
            return [self.get_hydrated_elements(r) for r in self._pager.get_results()]
        return [element.with_data(row) for element in self.elements]

    def iter_rows(self) -> Iterable[dict[str, Any]]:
        """Yield ``{element name: display value}`` for each row of the page."""
        for hydrated in self.get_hydrated_elements():
            yield {element.name: element.get_data() for element in hydrated}

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        for element in self.elements:
            if element.is_custom:
                raise SerializeError(
                    f"List '{self._id}' cannot be serialized because element "
                    f"'{element.name}' uses a custom extractor"
                )
        if self._external_query is not None:
            external = self._external_query.to_snapshot()
            working = self._query.to_snapshot() if self._query is not None else None
        else:
            external, working = self._pending_external, self._pending_query
        return ListSnapshot(
            id=self._id,
            query=working,
            external_query=external,
            filters=list(self.filters),
            sorters=list(self.sorters),
            elements=list(self.elements),
            per_page=self._per_page,
            current_page=self.current_page,
            persist=self.persist,
            dynamic=self.dynamic,
            filter_layout=self.filter_layout,
            list_layout=self.list_layout,
            element_layout=self.element_layout,
            pagination_layout=self.pagination_layout,
            translation_domain=self.translation_domain,
            custom_options=self._custom_options,
        ).to_dict()

    @classmethod
    def restore(cls, data: Any, repository: Repository | None = None) -> "ListEngine":
        """Rebuild an engine from :meth:`serialize` output.

        Raises :class:`~listerkit.kernel.errors.FormatError` for malformed data.
        Queries are rebuilt through *repository* on the next apply.
        """
        snapshot = ListSnapshot.from_dict(data)
        engine = cls(snapshot.id, repository=repository)
        engine.persist = snapshot.persist
        engine.dynamic = snapshot.dynamic
        engine.per_page = snapshot.per_page
        engine.current_page = snapshot.current_page
        engine.filter_layout = snapshot.filter_layout
        engine.list_layout = snapshot.list_layout
        engine.element_layout = snapshot.element_layout
        engine.pagination_layout = snapshot.pagination_layout
        engine.translation_domain = snapshot.translation_domain
        engine._custom_options = snapshot.custom_options
        engine._max_links = snapshot.custom_options["max_links"]
        for filter_ in snapshot.filters:
            engine.filters.set(filter_.name, filter_)
        for sorter in snapshot.sorters:
            engine.sorters.set(sorter.name, sorter)
        for element in snapshot.elements:
            engine.elements.set(element.name, element)
        engine._pending_query = snapshot.query
        engine._pending_external = snapshot.external_query
        return engine

    def __reduce_ex__(self, protocol: Any) -> NoReturn:
        raise SerializeError("ListEngine cannot be pickled or copied; use serialize()")

    def __getstate__(self) -> NoReturn:
        raise SerializeError("ListEngine cannot be pickled or copied; use serialize()")

    def __repr__(self) -> str:
        return (
            f"ListEngine(id={self._id!r}, filters={self.filters.keys()!r}, "
            f"sorters={self.sorters.keys()!r}, page={self.current_page})"
        )


__all__ = [
    "LIST_ID_FIELD",
    "PAGE_PARAMETER_PREFIX",
    "RESET_BUTTON",
    "SUBMIT_BUTTON",
    "ListEngine",
    "like_pattern",
]
