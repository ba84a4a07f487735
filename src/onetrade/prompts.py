"""Prompt templates sent to the generative-text provider."""

from __future__ import annotations

STOCK_CONTENT_PROMPT = """\
Return a prompt only in this format and nothing else using the stock symbol \
provided at the end unless you know nothing in which case return \
"Information is unavailable":

Symbol:
Exchange:

Description:

Industry:
Sector:
Address:
Website:
Market Cap:
Employees:
"""

NO_SUMMARY = "No summary available."
NO_NEWS = "No recent news articles were found."

SENTIMENT_PROMPT = """\
You are a financial news analyst. Using only the recent news about {symbol} \
listed below, decide whether an investor should Buy, Wait, or Sell the stock \
right now.

Answer format:
- The first line must be exactly one word: Buy, Wait, or Sell.
- The following lines give a short plain-text explanation of the decision.
- Do not quote the articles directly. Paraphrase in your own words.
- Do not use markdown, headings, or bullet points.

Recent news for {symbol}, newest first:

{articles}
"""


def stock_content_prompt(symbol: str) -> str:
    return STOCK_CONTENT_PROMPT + symbol.upper()
