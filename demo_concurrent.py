import asyncio

import httpx
from rich import print

from sdk.pystore import StoreClient

async def main():
    c = StoreClient(base_url="http://127.0.0.1:3000", api_key="mysecretapikey")

    # Fire several creates at once over one connection pool
    print("\n⚡ Creating products concurrently...")
    async with httpx.AsyncClient(timeout=c.timeout) as ac:
        created = await asyncio.gather(*[
            c.create_product_async(f"Gadget {i}", 10 + i, category="gadgets", client=ac)
            for i in range(5)
        ])

    ids = [p["id"] for p in created]
    for p in created:
        print(f"✅ {p['name']} -> {p['id']}")
    print(f"\nDistinct ids: {len(set(ids))} of {len(ids)}")

    print("\n📊 Stats:", c.product_stats())

    for pid in ids:
        c.delete_product(pid)
    print("🧹 Cleaned up")

if __name__ == "__main__":
    asyncio.run(main())
