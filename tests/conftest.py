import pytest

from deltafmt import BundleLocalizer, TableLocalizer


@pytest.fixture
def en() -> BundleLocalizer:
    return BundleLocalizer("en")


@pytest.fixture
def tagged() -> TableLocalizer:
    """Localizer whose strings reveal the key they came from."""
    strings = {
        "valuesep_full": "_",
        "unitsep_full": "|",
        "colloquial_now": "<now>",
    }
    for code in ("y", "m", "w", "d", "h", "M", "s"):
        for variant in (code, code * 2):
            strings[f"unitname_full_{variant}"] = f"<{variant}>"
            strings[f"colloquial_p_{variant}"] = f"<p_{variant}:{{0}}>"
            strings[f"colloquial_f_{variant}"] = f"<f_{variant}:{{0}}>"
    return TableLocalizer(strings)
