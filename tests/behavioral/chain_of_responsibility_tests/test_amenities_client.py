import pytest
from behavioral.chain_of_responsibility.amenities_chain import ChainConfigurationError, build_amenities_chain
from behavioral.chain_of_responsibility.amenities_client import DemoConfig, client_code, main


@pytest.mark.unit
def test_client_reports_served_and_unavailable_services():
    lines = []
    head = build_amenities_chain()[0]
    results = client_code(head, ["Pool", "Sauna"], lines.append)
    assert results == ["Amenities2: I'll avail the Pool.", None]
    assert lines == [
        "Client: Which Pool?",
        "   Amenities2: I'll avail the Pool.",
        "Client: Which Sauna?",
        "   Sauna was unavailable.",
    ]


@pytest.mark.unit
def test_main_runs_full_chain_then_sub_chain(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    chain, sub_chain = out.split("Subchain: ")
    assert chain.startswith("Chain: Amenities1 > Amenities2 > Amenities3")
    assert "Amenities1: I'll avail the Gymnasium." in chain
    assert sub_chain.startswith("Amenities2 > Amenities3")
    assert "Gymnasium was unavailable." in sub_chain
    assert "Amenities3: I'll avail the Buffet." in sub_chain


@pytest.mark.unit
def test_main_uses_config():
    lines = []
    config = DemoConfig(amenities=("Spa", "Bar"), services=("Bar",), subchain_start=1)
    assert main(config, lines.append) == 0
    assert lines[0] == "Chain: Amenities1 > Amenities2\n"
    assert lines.count("   Amenities2: I'll avail the Bar.") == 2


@pytest.mark.unit
@pytest.mark.parametrize("kwargs", [
    {"amenities": ()},
    {"services": ()},
    {"subchain_start": 3},
    {"subchain_start": -1},
    {"log_level": "LOUD"},
    {"log_level": "debug"},
])
def test_demo_config_rejects_invalid_settings(kwargs):
    with pytest.raises(ChainConfigurationError):
        DemoConfig(**kwargs)


@pytest.mark.unit
def test_demo_config_accepts_standard_level_names():
    assert DemoConfig(log_level="DEBUG").log_level == "DEBUG"
    assert DemoConfig(log_level="ERROR").log_level == "ERROR"
