# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

from prometheus_client import generate_latest

from steamexporter.a2s.adapters import StubQueryClient
from steamexporter.a2s.models import ProbeOutcome, ServerStatus
from steamexporter.collector.metrics import METRIC_DESCRIPTIONS, StatusCollector, build_registry
from steamexporter.collector.orchestrator import METRIC_NAMES, ProbeOrchestrator
from steamexporter.errors import DownReason


def _status():
    return ServerStatus(
        protocol_version=17,
        name="srv",
        map="cp_badlands",
        folder="tf",
        game="Team Fortress",
        app_id=440,
        players=12,
        max_players=24,
        bots=3,
        server_type=ord("d"),
        environment=ord("l"),
        visibility=0,
        vac=1,
        latency=0.25,
    )


def _registry(client, targets):
    collector = StatusCollector(ProbeOrchestrator(client, targets, timeout=0.1))
    return collector, build_registry(collector)


def test_every_measurement_has_a_description():
    assert set(METRIC_DESCRIPTIONS) == set(METRIC_NAMES)


def test_registering_does_not_probe():
    client = StubQueryClient()
    _registry(client, ["a:1"])
    assert client.calls == []


def test_scrape_exposes_gauges_per_address():
    client = StubQueryClient(
        {
            "up:1": ProbeOutcome.up("up:1", _status()),
            "down:2": ProbeOutcome.down("down:2", DownReason.TIMEOUT),
        }
    )
    _, registry = _registry(client, ["up:1", "down:2"])

    text = generate_latest(registry).decode("utf-8")

    assert "# TYPE steam_server_up gauge" in text
    assert 'steam_server_up{address="up:1"} 1.0' in text
    assert 'steam_server_up{address="down:2"} 0.0' in text
    assert 'steam_server_response_time_seconds{address="up:1"} 0.25' in text
    assert 'steam_server_players_total{address="up:1"} 12.0' in text
    assert 'steam_server_max_players_total{address="up:1"} 24.0' in text
    assert 'steam_server_bots_total{address="up:1"} 3.0' in text
    assert 'steam_server_players_total{address="down:2"}' not in text


def test_each_scrape_runs_a_fresh_pass():
    client = StubQueryClient({"a:1": ProbeOutcome.up("a:1", _status())})
    _, registry = _registry(client, ["a:1"])

    first = generate_latest(registry).decode("utf-8")
    client.add("a:1", ProbeOutcome.down("a:1", DownReason.READ_ERROR))
    second = generate_latest(registry).decode("utf-8")

    assert 'steam_server_up{address="a:1"} 1.0' in first
    assert 'steam_server_up{address="a:1"} 0.0' in second
    assert 'steam_server_players_total{address="a:1"}' not in second
    assert len(client.calls) == 2


def test_collect_yields_all_families_in_fixed_order():
    client = StubQueryClient()
    collector, _ = _registry(client, ["a:1"])

    names = [family.name for family in collector.collect()]
    assert names == [METRIC_DESCRIPTIONS[name][0] for name in METRIC_NAMES]
