
import sys

import httpx

API_URL = "http://localhost:8000/api/service"
DEFAULT_URLS = ["https://firecrawl.dev"]

def run_generate(urls, api_key=None):
    print(f"Generating llms.txt for {len(urls)} URLs...")
    try:
        body = {"urls": urls}
        if api_key:
            body["bringYourOwnFirecrawlApiKey"] = api_key

        print("Sending POST request...")
        resp = httpx.post(API_URL, json=body, timeout=600.0)
        if resp.status_code != 200:
            print(f"Generation failed ({resp.status_code}): {resp.text}")
            return
        data = resp.json()

        with open("llms.txt", "w", encoding="utf-8") as f:
            f.write(data["llmstxt"])
        print("llms.txt saved")

        with open("llms-full.txt", "w", encoding="utf-8") as f:
            f.write(data["llmsfulltxt"])
        print("llms-full.txt saved")

    except Exception as e:
        print(f"Error: {e}")

if __name__ == "__main__":
    run_generate(sys.argv[1:] or DEFAULT_URLS)
