
import asyncio
import os
import sys

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "backend")))

from app.schemas.llmstxt_request import GenerateRequest
from app.services.llmstxt_generator import LlmsTxtGenerator

async def main():
    urls = sys.argv[1:] or ["https://firecrawl.dev"]
    print(f"Running generation for {urls}...")

    generator = LlmsTxtGenerator()
    try:
        result = await generator.run(GenerateRequest(urls=urls))

        print("llms.txt:")
        print(result.llmstxt)
        print(f"llms-full.txt: {len(result.llmsfulltxt)} chars")

        with open("debug_llms-full.txt", "w", encoding="utf-8") as f:
            f.write(result.llmsfulltxt)
        print("Saved debug_llms-full.txt")

    except Exception as e:
        print(f"Exception during run: {type(e).__name__}: {e}")
        import traceback
        traceback.print_exc()

if __name__ == "__main__":
    asyncio.run(main())
