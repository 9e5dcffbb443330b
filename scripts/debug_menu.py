import asyncio, sys, os, logging

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(ROOT)

from app.services.menu_service import load_catalog

logging.basicConfig(level=logging.INFO)
logging.getLogger("app.catalog").setLevel(logging.DEBUG)


async def main():
    catalog, category_map, normalized = await load_catalog()

    print(f"Categories ({len(category_map)}):")
    for cid, name in category_map.items():
        print(f"  {cid} -> {name}")

    print(f"\nItems ({len(normalized)}):")
    for item in normalized:
        names = ", ".join(item.category_names) or "Uncategorized"
        print(f"  {item.id}  {item.name!r}  ids={list(item.category_ids)}  -> {names}")

    uncategorized = [n for n in normalized if not n.category_names]
    print(f"\n{len(uncategorized)} item(s) without a resolvable category")

if __name__ == "__main__":
    asyncio.run(main())
