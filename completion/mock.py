"""Canned completion for development without model credentials."""

from typing import Dict, List, Optional

from core.logging_utils import get_logger

LOGGER = get_logger()

MOCK_QUIZ_RESPONSE = """```json
[
  {
    "id": 1,
    "text": "Which accounting principle requires expenses to be recognized in the same period as the revenue they helped earn?",
    "options": [
      {"id": 1, "text": "The matching principle", "isCorrect": true, "explanation": "The matching principle ties cost of goods sold and other expenses to the revenue of the same period."},
      {"id": 2, "text": "The historical cost principle", "isCorrect": false, "explanation": "Historical cost is about how assets are measured, not when expenses are recognized."},
      {"id": 3, "text": "The full disclosure principle", "isCorrect": false, "explanation": "Disclosure concerns what is reported in the notes, not timing."},
      {"id": 4, "text": "The conservatism principle", "isCorrect": false, "explanation": "Conservatism guides estimates under uncertainty."}
    ]
  },
  {
    "id": 2,
    "text": "A physical count shows less inventory than the books. What should the financial statements reflect?",
    "options": [
      {"id": 1, "text": "The book value, for consistency with prior periods", "isCorrect": false, "explanation": "Consistency never overrides accuracy."},
      {"id": 2, "text": "The average of the book value and the count", "isCorrect": false, "explanation": "Averaging has no basis in accounting standards."},
      {"id": 3, "text": "The physical count", "isCorrect": true, "explanation": "Faithful representation requires adjusting inventory to the actual count."},
      {"id": 4, "text": "Whichever value is higher", "isCorrect": false, "explanation": "Choosing the higher value would overstate assets."}
    ]
  },
  {
    "id": 3,
    "text": "What is the internal auditor's priority after finding an inventory discrepancy?",
    "options": [
      {"id": 1, "text": "Investigate the cause and recommend control improvements", "isCorrect": true, "explanation": "Finding the control weakness prevents the problem from recurring."},
      {"id": 2, "text": "Report directly to external regulators", "isCorrect": false, "explanation": "Findings go to management and the audit committee first."},
      {"id": 3, "text": "Adjust the records without investigation", "isCorrect": false, "explanation": "Adjusting alone leaves the underlying issue in place."},
      {"id": 4, "text": "Switch inventory costing methods", "isCorrect": false, "explanation": "The costing method is not the source of the discrepancy."}
    ]
  }
]
```"""


class MockCompletion:
    """Returns the same fenced three-question quiz for every request."""

    def __init__(self, response: str = MOCK_QUIZ_RESPONSE):
        self.response = response

    def generate_text(self, messages: List[Dict[str, str]], temperature: Optional[float] = None) -> str:
        LOGGER.warning("Using mock completion response (%d message(s) ignored)", len(messages))
        return self.response
