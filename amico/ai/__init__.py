"""AI building blocks: errors, messages, tools, providers, completion requests and services."""