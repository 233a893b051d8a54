"""NiceGUI interface - thin visualization layer for the conversation store.

Responsibilities:
    - Message thread display with markdown for assistant replies
    - Typing indicator and disabled input while a reply is pending
    - Auto-scroll to the newest message
    - Starting a fresh conversation

Contains no exchange logic. Delegates all state changes to ConversationStore.
"""
