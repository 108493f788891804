"""Tests del catálogo: registro, alias y construcción de demos."""

import pytest

from core.domain.errors import UnknownPatternError
from core.domain.models import PatternCategory
from core.interfaces.demo import PatternDemo
from core.resources_loader import missing_docs
from core.services.catalogue import create_demo, get_info, list_infos, resolve_slug

GOF_SLUGS = {
    "singleton", "factory-method", "abstract-factory", "builder", "prototype",
    "adapter", "bridge", "composite", "decorator", "flyweight", "proxy",
    "observer", "strategy", "state", "command", "chain-of-responsibility",
    "template-method", "interpreter", "visitor", "mediator", "memento", "iterator",
}


def test_catalogue_contains_every_gof_pattern_and_principles():
    slugs = {info.slug for info in list_infos()}
    assert GOF_SLUGS <= slugs
    assert {"single-responsibility", "programming-to-an-interface", "delegation"} <= slugs
    assert len(slugs) == len(list_infos())


def test_catalogue_is_ordered_by_category():
    orders = [info.category.order() for info in list_infos()]
    assert orders == sorted(orders)
    assert list_infos()[0].slug == "singleton"


def test_filter_by_category():
    creational = list_infos(PatternCategory.CREATIONAL)
    assert [i.slug for i in creational] == [
        "singleton", "factory-method", "abstract-factory", "builder", "prototype",
    ]
    assert all(i.category is PatternCategory.PRINCIPLE for i in list_infos(PatternCategory.PRINCIPLE))


def test_challenges_are_flagged():
    challenges = {info.slug for info in list_infos() if info.challenge}
    assert challenges == {"singleton", "factory-method", "abstract-factory"}


@pytest.mark.parametrize(
    ("key", "slug"),
    [
        ("observer", "observer"),
        ("Observer", "observer"),
        ("chain_of_responsibility", "chain-of-responsibility"),
        ("cor", "chain-of-responsibility"),
        ("template", "template-method"),
        ("Template Method", "template-method"),
        ("srp", "single-responsibility"),
        ("pub-sub", "observer"),
    ],
)
def test_resolve_slug_accepts_aliases(key, slug):
    assert resolve_slug(key) == slug


def test_unknown_pattern_suggests_close_matches():
    with pytest.raises(UnknownPatternError) as excinfo:
        resolve_slug("singelton")
    assert "singleton" in excinfo.value.suggestions
    assert excinfo.value.exit_code == 2
    assert excinfo.value.to_dict()["code"] == "unknown_pattern"


def test_create_demo_returns_protocol_instance(settings):
    demo = create_demo("visitor", settings)
    assert isinstance(demo, PatternDemo)
    assert demo.info is get_info("visitor")


def test_every_entry_has_documentation():
    assert missing_docs([info.slug for info in list_infos()]) == []


def test_intent_language():
    from core.domain.language import Language

    info = get_info("strategy")
    assert info.intent_for(Language.ENGLISH) == info.intent
    assert info.intent_for(Language.SPANISH) == info.intent_es
