"""Tests for resolving a step's context through a resolver."""

from collections.abc import Mapping, Sequence
from typing import Any

import pytest

from switchboard.context import ContextField, ContextMap, resolve_step_context
from switchboard.errors import MissingRequiredContext
from switchboard.taxonomy import Domain
from tests.factories.registries import build_context_map


class RecordingResolver:
    """Resolver backed by a dict that records every call."""

    def __init__(self, values: Mapping[str, Any]) -> None:
        self.values = dict(values)
        self.calls: list[tuple[str, ...]] = []

    def resolve(self, fields: Sequence[ContextField]) -> Mapping[str, Any]:
        self.calls.append(tuple(field.key for field in fields))
        return {field.key: self.values[field.key] for field in fields if field.key in self.values}


@pytest.fixture(scope="module")
def context_map() -> ContextMap:
    return build_context_map()


class TestResolveStepContext:
    """Resolution fills optional gaps and refuses required ones."""

    def test_all_fields_resolved(self, context_map: ContextMap) -> None:
        resolver = RecordingResolver({"business_name": "Green Co", "job_id": "4521", "team_members": ["Mike"]})
        context = context_map.get_required_context(Domain.SCHEDULING, "schedule_job")

        values = resolve_step_context(context, resolver)

        assert values == {"business_name": "Green Co", "job_id": "4521", "team_members": ["Mike"]}

    def test_one_resolver_call_with_shared_fields_first(self, context_map: ContextMap) -> None:
        resolver = RecordingResolver({"business_name": "Green Co", "job_id": "4521"})
        context = context_map.get_required_context(Domain.SCHEDULING, "schedule_job")

        resolve_step_context(context, resolver)

        assert resolver.calls == [("business_name", "job_id", "team_members")]

    def test_missing_optional_gets_empty_value(self, context_map: ContextMap) -> None:
        resolver = RecordingResolver({"business_name": "Green Co", "job_id": "4521"})
        context = context_map.get_required_context(Domain.SCHEDULING, "schedule_job")

        values = resolve_step_context(context, resolver)

        assert values["team_members"] == []

    def test_missing_optional_scalar_is_blank(self, context_map: ContextMap) -> None:
        resolver = RecordingResolver({"business_name": "Green Co"})
        context = context_map.get_required_context(Domain.INVOICING, "close_out_job")

        assert resolve_step_context(context, resolver) == {"business_name": "Green Co", "job_title": ""}

    @pytest.mark.parametrize("values", [{"business_name": "Green Co"}, {"business_name": "Green Co", "job_id": None}])
    def test_missing_required_raises(self, context_map: ContextMap, values: dict[str, Any]) -> None:
        context = context_map.get_required_context(Domain.SCHEDULING, "schedule_job")

        with pytest.raises(MissingRequiredContext) as exc_info:
            resolve_step_context(context, RecordingResolver(values))

        assert exc_info.value.template_id == "scheduling/schedule_job"
        assert exc_info.value.missing_keys == ["job_id"]

    def test_every_missing_required_key_is_reported(self, context_map: ContextMap) -> None:
        context = context_map.get_required_context(Domain.SCHEDULING, "schedule_job")

        with pytest.raises(MissingRequiredContext) as exc_info:
            resolve_step_context(context, RecordingResolver({}))

        assert exc_info.value.missing_keys == ["business_name", "job_id"]

    def test_falsy_values_are_kept(self, context_map: ContextMap) -> None:
        resolver = RecordingResolver({"business_name": "", "job_id": 0, "team_members": []})
        context = context_map.get_required_context(Domain.SCHEDULING, "schedule_job")

        assert resolve_step_context(context, resolver) == {"business_name": "", "job_id": 0, "team_members": []}
