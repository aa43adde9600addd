"""
Generative answer prompt.

Defines the grounded-answer system prompt and the user turn template.

Dependencies: langchain_core.prompts
System role: Prompt template for the generative synthesizer
"""

from langchain_core.prompts import ChatPromptTemplate

SYSTEM_PROMPT = """You are a helpful assistant that answers questions about an uploaded document.

## Instructions
1. Use ONLY the provided context to answer the question
2. If the context does not contain the answer, say that you don't know
3. Do not make up facts that are not in the context
4. Be concise and quote the relevant text when it helps"""

ANSWER_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """Context:
{context}

Question: {question}"""),
])
