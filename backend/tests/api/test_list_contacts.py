"""List Contacts — GET /contacts?page=&limit=.

Invariants:
    - Response is {contacts, total, page, limit, totalPages}
    - totalPages = ceil(total / limit); 0 for an empty store
    - Contacts ordered by name across pages
    - Malformed, zero and negative pagination values fall back to defaults

Design Decisions:
    - Count and page are two separate reads; these tests run without
      concurrent writes, so total always matches the pages
"""

import random


async def _seed(create_contact, names):
    for i, name in enumerate(names):
        res = await create_contact(name, f"{name.lower()}-{i}@x.com", "1234567890")
        assert res.status_code == 201


async def test_empty_store(client):
    res = await client.get("/contacts")
    assert res.status_code == 200
    assert res.json() == {
        "contacts": [], "total": 0, "page": 1, "limit": 10, "totalPages": 0,
    }


async def test_second_page_of_twelve(client, create_contact):
    names = [f"C{i}" for i in range(12)]
    random.Random(7).shuffle(names)
    await _seed(create_contact, names)

    res = await client.get("/contacts", params={"page": 2, "limit": 10})

    body = res.json()
    assert res.status_code == 200
    assert len(body["contacts"]) == 2
    assert body["total"] == 12
    assert body["totalPages"] == 2
    assert body["page"] == 2
    assert body["limit"] == 10
    # lexicographic: C0, C1, C10, C11, C2 ... C9
    assert [c["name"] for c in body["contacts"]] == ["C8", "C9"]


async def test_total_pages_rounds_up(client, create_contact):
    await _seed(create_contact, [f"P{i:02d}" for i in range(25)])
    body = (await client.get("/contacts", params={"limit": 10})).json()
    assert body["total"] == 25
    assert body["totalPages"] == 3


async def test_all_pages_are_name_ordered(client, create_contact):
    names = ["delta", "Alpha", "charlie", "Bravo", "echo", "alpha", "Delta"]
    await _seed(create_contact, names)

    seen = []
    page = 1
    while True:
        body = (await client.get(
            "/contacts", params={"page": page, "limit": 3},
        )).json()
        seen.extend(c["name"] for c in body["contacts"])
        if page >= body["totalPages"]:
            break
        page += 1

    assert len(seen) == len(names)
    assert seen == sorted(seen)


async def test_created_contact_appears_verbatim(client, create_contact):
    created = await create_contact("A", "a@x.com", "1234567890")

    body = (await client.get("/contacts")).json()

    assert body["contacts"] == [{
        "id": created.json()["id"],
        "name": "A", "email": "a@x.com", "phone": "1234567890",
    }]


async def test_page_past_end_is_empty(client, create_contact):
    await _seed(create_contact, ["A", "B"])
    body = (await client.get("/contacts", params={"page": 5})).json()
    assert body["contacts"] == []
    assert body["total"] == 2
    assert body["page"] == 5


async def test_malformed_params_fall_back_to_defaults(client, create_contact):
    await _seed(create_contact, ["A"])
    res = await client.get("/contacts", params={"page": "abc", "limit": "lots"})
    assert res.status_code == 200
    body = res.json()
    assert (body["page"], body["limit"]) == (1, 10)


async def test_integer_prefix_is_honoured(client):
    body = (await client.get(
        "/contacts", params={"page": "2abc", "limit": "5px"},
    )).json()
    assert (body["page"], body["limit"]) == (2, 5)


async def test_zero_and_negative_params_fall_back(client, create_contact):
    await _seed(create_contact, ["A", "B"])

    zero = (await client.get("/contacts", params={"page": 0, "limit": 0})).json()
    negative = (await client.get("/contacts", params={"page": -1, "limit": -5})).json()

    for body in (zero, negative):
        assert (body["page"], body["limit"]) == (1, 10)
        assert [c["name"] for c in body["contacts"]] == ["A", "B"]


async def test_huge_limit_returns_everything(client, create_contact):
    await _seed(create_contact, ["A", "B"])

    res = await client.get("/contacts", params={"limit": "9" * 20})

    assert res.status_code == 200
    body = res.json()
    assert body["limit"] == 2**63 - 1
    assert [c["name"] for c in body["contacts"]] == ["A", "B"]
    assert body["totalPages"] == 1


async def test_huge_page_returns_empty_page(client, create_contact):
    await _seed(create_contact, ["A"])

    res = await client.get("/contacts", params={"page": "9" * 19})

    assert res.status_code == 200
    body = res.json()
    assert body["contacts"] == []
    assert body["total"] == 1


async def test_huge_page_and_limit_together(client, create_contact):
    await _seed(create_contact, ["A"])
    res = await client.get(
        "/contacts", params={"page": "9" * 19, "limit": "9" * 20},
    )
    assert res.status_code == 200
    assert res.json()["contacts"] == []
