"""
LLMs.txt Builder - Assembles llms.txt and llms-full.txt from per-page results.
"""
from dataclasses import dataclass
from typing import Iterable


LLMSTXT_DISCLAIMER = (
    "\n\n*Note: This is a full scrape of the website, and may not be representative of the "
    "entire site. Please enter a Firecrawl API key to get the entire site at llmstxt.firecrawl.dev.*"
)
LLMSFULLTXT_DISCLAIMER = (
    "\n\n*Note: This is a full scrape of the website, and may not be representative of the "
    "entire site. Please enter a Firecrawl API key to get the entire site at llmsfulltxt.firecrawl.dev.*"
)


@dataclass
class PageResult:
    """A scraped page with its derived title and description."""
    url: str
    markdown: str
    title: str
    description: str


@dataclass
class LlmsTxtDocuments:
    llmstxt: str
    llmsfulltxt: str


class LlmsTxtBuilder:
    """Concatenates page results in the order given."""

    def __init__(self, stem: str):
        self.stem = stem
        self.llmstxt = f"# {stem} llms.txt\n\n"
        self.llmsfulltxt = f"# {stem} llms-full.txt\n\n"

    def add_page(self, page: PageResult) -> None:
        self.llmstxt += f"- [{page.title}]({page.url}): {page.description}\n"
        self.llmsfulltxt += page.markdown

    def build(self, no_limit: bool) -> LlmsTxtDocuments:
        """Finish both documents; the restricted tier gets the disclaimer."""
        llmstxt = self.llmstxt
        llmsfulltxt = self.llmsfulltxt
        if not no_limit:
            llmstxt += LLMSTXT_DISCLAIMER
            llmsfulltxt += LLMSFULLTXT_DISCLAIMER
        return LlmsTxtDocuments(llmstxt=llmstxt, llmsfulltxt=llmsfulltxt)


def build_documents(stem: str, pages: Iterable[PageResult], no_limit: bool) -> LlmsTxtDocuments:
    builder = LlmsTxtBuilder(stem)
    for page in pages:
        builder.add_page(page)
    return builder.build(no_limit)
