"""
Retrieval-QA prompt.

"Stuff" prompt combining retrieved chunk text with the user's question.

Dependencies: langchain_core.prompts
System role: Prompt template for retrieval-augmented answering
"""

from langchain_core.prompts import ChatPromptTemplate

SYSTEM_PROMPT = """Use the following pieces of context to answer the user's question. If you don't know the answer, just say that you don't know, don't try to make up an answer.
----------------
{context}"""

QA_PROMPT = ChatPromptTemplate.from_messages(
    [
        ("system", SYSTEM_PROMPT),
        ("human", "{question}"),
    ]
)

CONTEXT_SEPARATOR = "\n\n"
