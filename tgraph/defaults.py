"""Default files for a new graph workspace."""

from tgraph.config import CONFIG_NAME


def structure(name):
    """Default workspace structure."""
    return {
        name: {
            CONFIG_NAME: tgraph_yml,
            "sample.tgf": sample_tgf,
        }
    }


tgraph_yml = """\
input: sample.tgf
vertex_type: str
edge_type: str
"""


sample_tgf = """\
1 Moscow
2 Saint Petersburg
3 Novosibirsk
4 Yekaterinburg
5 Kazan
6 Vladivostok
7 Khabarovsk
#
1 2 train
1 5 plane
2 1 train
4 3 road
5 4 road
6 7 ferry
"""
