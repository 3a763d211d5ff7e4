"""
Step definitions for cf-notice change detection tests.
"""

import dataclasses
import os

from behave import given, when, then

from cf_notice.core.check_cycle import CheckCycle
from cf_notice.core.records import DNSRecord
from cf_notice.core.reporter import ReportFilter
from cf_notice.core.scheduler import Scheduler


def _records_from_table(table):
    return [
        DNSRecord(id=row["id"], name=row["name"], type=row["type"], content=row["content"])
        for row in table
    ]


def _ids(text):
    return [value.strip() for value in text.split(",") if value.strip()]


def _read_snapshot_file(context):
    with open(context.storage_path, "rb") as f:
        return f.read()


@given("there is no snapshot file")
def step_impl(context):
    """Make sure no snapshot exists yet."""
    assert not os.path.exists(context.storage_path)


@given("the snapshot for the zone contains the records")
def step_impl(context):
    """Store a snapshot for the test zone."""
    context.store.save(context.test_zone, _records_from_table(context.table))
    context.snapshot_before = _read_snapshot_file(context)


@given('the snapshot for zone "{zone_id}" contains "{ids}"')
def step_impl(context, zone_id, ids):
    """Store a snapshot for another zone."""
    context.store.save(zone_id, [DNSRecord(id=i) for i in _ids(ids)])


@given("the zone has the records")
def step_impl(context):
    """Set the records returned by the provider."""
    context.provider.set_records(context.test_zone, _records_from_table(context.table))


@given("the provider API is failing")
def step_impl(context):
    """Make the provider return errors."""
    context.provider.fail_with("failed to fetch DNS records: 500 Internal Server Error", 500)


@given('the report filter is "{name}"')
def step_impl(context, name):
    """Select the report filter."""
    context.checker_config = dataclasses.replace(context.checker_config, report_filter=ReportFilter.from_name(name))


@given("the polling interval is {interval:d} seconds")
def step_impl(context, interval):
    """Enable periodic checks."""
    context.checker_config = dataclasses.replace(context.checker_config, polling_interval=interval)


@given('record "{record_id}" is added to the zone after the first check')
def step_impl(context, record_id):
    """Change the zone between the first and second check."""
    context.record_added_later = DNSRecord(id=record_id, name=f"r{record_id}.example.com", type="A")


@when("I run a check")
def step_impl(context):
    """Run a single check cycle."""
    cycle = CheckCycle(context.checker_config, context.provider, context.store, context.reporter)
    context.results.append(cycle.run())


@when("I run the scheduler for {count:d} checks")
def step_impl(context, count):
    """Run the scheduler with a fake clock."""
    context.now = 0.0
    context.starts = []
    cycle = CheckCycle(context.checker_config, context.provider, context.store, context.reporter)

    def clock():
        return context.now

    def sleep(seconds):
        context.now += seconds
        if getattr(context, "record_added_later", None) is not None:
            records = context.provider.list_dns_records(context.test_zone)
            context.provider.set_records(context.test_zone, records + [context.record_added_later])
            context.record_added_later = None

    class RecordingCycle:
        def run(self):
            context.starts.append(context.now)
            result = cycle.run()
            context.results.append(result)
            context.now += 1.0
            return result

    Scheduler(context.checker_config, RecordingCycle(), clock=clock, sleep=sleep).run(max_cycles=count)


@then("the report shows {added:d} added and {removed:d} removed")
def step_impl(context, added, removed):
    """Verify the summary line."""
    assert f"Changes detected! Added: {added}, Removed: {removed}" in context.output.getvalue()


@then('the unchanged records are "{ids}"')
def step_impl(context, ids):
    assert [r.id for r in context.results[-1].changes.unchanged] == _ids(ids)


@then('the added records are "{ids}"')
def step_impl(context, ids):
    assert [r.id for r in context.results[-1].changes.added] == _ids(ids)


@then('the removed records are "{ids}"')
def step_impl(context, ids):
    assert [r.id for r in context.results[-1].changes.removed] == _ids(ids)


@then('the snapshot for the zone contains "{ids}"')
def step_impl(context, ids):
    """Verify the stored snapshot of the test zone."""
    assert [r.id for r in context.store.load(context.test_zone)] == _ids(ids)


@then('the snapshot for zone "{zone_id}" contains "{ids}"')
def step_impl(context, zone_id, ids):
    """Verify the stored snapshot of another zone."""
    assert [r.id for r in context.store.load(zone_id)] == _ids(ids)


@then("the check fails with an API error")
def step_impl(context):
    assert context.results[-1].status == "failed"
    assert "Failed to fetch DNS records" in context.output.getvalue()


@then("no change report is printed")
def step_impl(context):
    assert "Changes detected" not in context.output.getvalue()


@then("the snapshot file is unchanged")
def step_impl(context):
    assert _read_snapshot_file(context) == context.snapshot_before


@then("there is no snapshot file")
def step_impl(context):
    assert not os.path.exists(context.storage_path)


@then('the output contains "{text}"')
def step_impl(context, text):
    assert text in context.output.getvalue()


@then('the output does not contain "{text}"')
def step_impl(context, text):
    assert text not in context.output.getvalue()


@then("{count:d} checks ran {interval:d} seconds apart")
def step_impl(context, count, interval):
    """Verify the check start times."""
    assert len(context.starts) == count
    for earlier, later in zip(context.starts, context.starts[1:]):
        assert later - earlier == interval, context.starts


@then('the last check added "{ids}"')
def step_impl(context, ids):
    assert [r.id for r in context.results[-1].changes.added] == _ids(ids)
