# fetchers/__init__.py
from . import naver

FETCHERS = {
    "naver": naver.make_search,
}
