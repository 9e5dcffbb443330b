import asyncio, sys, os, json

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(ROOT)

from app.services.menu_service import list_categories_from_square


async def main():
    result = await list_categories_from_square()

    # Export to JSON
    with open("menu_categories.json", "w") as f:
        json.dump(result["categories"], f, indent=2)

    print(f"Exported {result['count']} menu categories to menu_categories.json")

if __name__ == "__main__":
    asyncio.run(main())
