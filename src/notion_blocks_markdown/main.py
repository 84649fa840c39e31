from notion_blocks_markdown.api.client import NotionClient
from notion_blocks_markdown.render.options import RendererOptions
from notion_blocks_markdown.render.walker import MarkdownRenderer
from pathlib import Path
import asyncio
from typing import Optional


def page_to_markdown(
    page_id: str,
    client: Optional[NotionClient] = None,
    options: Optional[RendererOptions] = None,
) -> str:
    """Fetch a page from Notion and render it to markdown."""
    client = client or NotionClient()
    renderer = MarkdownRenderer(options or RendererOptions.from_env())
    blocks = client.get_page_blocks(page_id)
    return asyncio.run(renderer.render(blocks))


def list_pages():
    """Print the pages and databases shared with the integration."""
    client = NotionClient()

    print("\nShared Pages:")
    for page in client.list_shared_pages():
        print(f"- {page.title} ({page.type})")
        print(f"  URL: {page.url}")
        print(f"  ID: {page.id}\n")


def list_databases():
    client = NotionClient()

    print("\nShared Databases:")
    for database in client.list_shared_databases():
        print(f"- {database.title} ({database.type})")
        print(f"  URL: {database.url}")
        print(f"  ID: {database.id}\n")


def print_page(page_id: str):
    """Render a page and print the markdown."""
    markdown = page_to_markdown(page_id)
    print("=" * 80)
    print(markdown)
    print("=" * 80)


def save_page(page_id: str, path: str):
    """Render a page and write the markdown to a file."""
    markdown = page_to_markdown(page_id)
    target = Path(path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(markdown, encoding="utf-8")
    print(f"\nSaved {len(markdown)} characters to {target}")


def main():
    try:
        while True:
            print("\nnotion blocks to markdown\n---")
            print("1. list shared pages")
            print("2. list shared databases")
            print("3. render a page")
            print("4. save a page to a file")
            print("5. quit")

            choice = input("\nenter your choice (1-5): ")

            if choice == "1":
                list_pages()
            elif choice == "2":
                list_databases()
            elif choice == "3":
                page_id = input("\nenter the page id: ").strip()
                if page_id:
                    print_page(page_id)
            elif choice == "4":
                page_id = input("\nenter the page id: ").strip()
                if not page_id:
                    continue
                path = input("output file (default: <page id>.md): ").strip()
                save_page(page_id, path or f"{page_id}.md")
            elif choice == "5":
                print("\ngoodbye!")
                break
            else:
                print("\ninvalid choice. please try again.")

    except Exception as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
