# prompt.py
FALLBACK_ANSWER = "Sorry, I don't know how to help with that."

SYSTEM_INSTRUCTION = (
    "You are a very enthusiastic support representative who loves "
    "to help people! Given the following sections from the product "
    "documentation, answer the question using only that information, "
    "outputted in markdown format. If you are unsure and the answer "
    "is not explicitly written in the documentation, say "
    f'"{FALLBACK_ANSWER}"'
)


def build_prompt(context: str, query: str) -> str:
    lines = [
        SYSTEM_INSTRUCTION,
        "",
        "Context sections:",
        context,
        "",
        'Question: """',
        query,
        '"""',
        "",
        "Answer as markdown (including related code snippets if available):",
    ]
    return "\n".join(lines)
