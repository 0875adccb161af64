# backend/vector_search/core/tokenizer.py
"""
Token counting for the context budget.

Uses the GPT-2 byte-pair vocabulary from Hugging Face `transformers`, the same
vocabulary the gpt3 tokenizer encodes with. Counts are only a budgeting
heuristic, so any consistent text -> int counter can be passed to
build_context instead.
"""


class TokenCounter:
    def __init__(self, tokenizer_name: str = "gpt2"):
        self.tokenizer_name = (tokenizer_name or "").strip() or "gpt2"
        self._tokenizer = None  # loaded on first use

    def _load_tokenizer(self):
        if self._tokenizer is None:
            from transformers import GPT2TokenizerFast

            self._tokenizer = GPT2TokenizerFast.from_pretrained(self.tokenizer_name)
            # sections are only counted, never fed to a model; silence the length warning
            self._tokenizer.model_max_length = int(1e30)
        return self._tokenizer

    def count(self, text: str) -> int:
        if not text:
            return 0
        return len(self._load_tokenizer().encode(text))

    def __call__(self, text: str) -> int:
        return self.count(text)
