"""Tests de las demos estructurales."""

from patterns.structural.adapter import AdapterDemo, LegacyXmlAnalytics, XmlAnalyticsAdapter
from patterns.structural.bridge import AdvancedRemoteControl, BridgeDemo, Radio, RemoteControl, TV
from patterns.structural.composite import CompositeDemo, Directory, File
from patterns.structural.decorator import Bacon, BasicBurger, Cheese, DecoratorDemo
from patterns.structural.flyweight import FlyweightDemo, Forest
from patterns.structural.proxy import ImageProxy, ProxyDemo


def test_adapter_translates_dict_to_xml():
    assert XmlAnalyticsAdapter.to_xml({"b": 2, "a": "x<y"}) == "<event><a>x&lt;y</a><b>2</b></event>"
    result = XmlAnalyticsAdapter(LegacyXmlAnalytics()).track({"name": "login"})
    assert result.endswith("<event><name>login</name></event>")


def test_adapter_demo(run_lines):
    lines = run_lines(AdapterDemo())
    assert len(lines) == 2
    assert "fish &amp; chips" in lines[1]


def test_bridge_remotes_work_with_any_device():
    remote = AdvancedRemoteControl(TV())
    remote.toggle_power()
    remote.volume_up()
    assert remote.device.status() == "TV is on, volume 40"
    remote.mute()
    assert remote.device.volume == 0

    radio = Radio()
    for _ in range(10):
        RemoteControl(radio).volume_up()
    assert radio.volume == 100


def test_bridge_demo(run_lines):
    assert run_lines(BridgeDemo()) == [
        "Basic remote: TV is on, volume 40",
        "Advanced remote: Radio is on, volume 0",
    ]


def test_composite_sizes_are_recursive():
    tree = Directory("root", [File("a", 10), Directory("sub", [File("b", 5), File("c", 7)])])
    assert tree.size() == 22
    assert tree.render() == ["root/ (22 B)", "  a (10 B)", "  sub/ (12 B)", "    b (5 B)", "    c (7 B)"]


def test_composite_demo(run_lines):
    lines = run_lines(CompositeDemo())
    assert lines[0] == "project/ (500 B)"
    assert lines[-1] == "Total size: 500 B"


def test_decorators_stack_cost_and_description():
    burger = Bacon(Cheese(BasicBurger()))
    assert burger.description() == "Basic burger, cheese, bacon"
    assert burger.cost() == 8.0


def test_decorator_demo(run_lines):
    lines = run_lines(DecoratorDemo())
    assert lines[0] == "Basic burger: 5.00"
    assert lines[-1] == "Basic burger, cheese, bacon, avocado: 9.50"


def test_flyweight_shares_types():
    forest = Forest()
    a = forest.plant(0, 0, "oak", "green", "rough")
    b = forest.plant(5, 5, "oak", "green", "rough")
    forest.plant(1, 1, "pine", "dark green", "needles")
    assert a.kind is b.kind
    assert len(forest.factory) == 2


def test_flyweight_demo(run_lines):
    assert run_lines(FlyweightDemo()) == [
        "Trees planted: 1000",
        "Tree types created: 3",
        "Trees #0 and #3 share their type: True",
    ]


def test_proxy_loads_real_object_once():
    proxy = ImageProxy("a.png")
    assert not proxy.loaded
    proxy.display()
    proxy.display()
    assert proxy.loaded
    assert proxy.accesses == 2
    assert proxy.loads == 1


def test_proxy_demo(run_lines):
    lines = run_lines(ProxyDemo())
    assert lines[0] == "Proxy created, image loaded: False"
    assert lines[1].startswith("Loading holiday.png from disk...")
    assert lines[2] == "Displaying holiday.png (cached)"
    assert lines[3] == "Accesses through proxy: 2"
