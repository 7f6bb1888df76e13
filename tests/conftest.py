import pytest


SAMPLE_LINE = (
    "Loft\tNice place\t2023-01-01\tParis\timg.jpg\ta.jpg;b.jpg\ttrue\tfalse\t4.5\tapartment"
    "\t2\t4\t100\tBreakfast;Washer\tJohn;j@x.com;av.png;pw;pro\t3\t48.85;2.35"
)


@pytest.fixture
def sample_line():
    return SAMPLE_LINE


@pytest.fixture
def offers_file(tmp_path):
    """TSV file with two offers separated by blank lines"""
    second = SAMPLE_LINE.replace("Loft", "Cottage").replace("Paris", "Hamburg")
    path = tmp_path / "offers.tsv"
    path.write_text(f"{SAMPLE_LINE}\n\n   \n{second}\n", encoding="utf-8")
    return path
