"""Tests for container wiring."""

from nutrilog.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.diary_service.repository is container.stats_service.repository
    assert container.diary_service.products is container.product_service
    assert container.dashboard_service.diary_service is container.diary_service
