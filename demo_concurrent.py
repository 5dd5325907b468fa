import asyncio
import os
from sdk.pycatalog import CatalogClient

async def create_with_code(client, writer, code_value):
    r = await client.create_product_async(f"Limited item ({writer})", 1, code_value, True, "31/12/2099", 99.0)
    if r.status_code == 201:
        print(f"✅ {writer} created product {r.json()['data']['id']}")
    elif r.status_code == 400:
        print(f"❌ {writer} rejected: {r.json()['error']}")
    else:
        print(f"⚠️  {writer} unexpected response {r.status_code}: {r.text}")
    return r.status_code

async def main():
    c = CatalogClient(base_url="http://127.0.0.1:8080", token=os.getenv("TOKEN", "12345"))
    code_value = "LIMITED-001"

    # Several writers race for the same code; exactly one should win
    print("\n⚡ Simulating concurrent creates...")
    statuses = await asyncio.gather(*[
        create_with_code(c, f"writer-{i}", code_value) for i in range(5)
    ])

    print(f"\n📦 {statuses.count(201)} created, {statuses.count(400)} rejected")
    matches = [p for p in c.list_products() if p["code_value"] == code_value]
    print("🔎 Products with that code:", matches)

if __name__ == "__main__":
    asyncio.run(main())
