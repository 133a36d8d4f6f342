def raw_item(title, brand="", lprice="", price="", category2="", category3="", **extra):
    """Build a shop.json item the way the upstream returns it (strings everywhere)."""
    item = {
        "title": title,
        "brand": brand,
        "lprice": lprice,
        "price": price,
        "image": extra.pop("image", "https://shopping-phinf.pstatic.net/img.jpg"),
        "link": extra.pop("link", "https://search.shopping.naver.com/catalog/1"),
        "category1": extra.pop("category1", "디지털/가전"),
        "category2": category2,
        "category3": category3,
        "category4": extra.pop("category4", ""),
    }
    item.update(extra)
    return item


class FakeSearch:
    """
    Stand-in for the upstream search. responses maps the exact query string
    to a list of items or an exception instance to raise.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def __call__(self, query, strategy):
        self.calls.append((query, strategy))
        result = self.responses.get(query, [])
        if isinstance(result, Exception):
            raise result
        return list(result)

    @property
    def queries(self):
        return [q for q, _ in self.calls]
