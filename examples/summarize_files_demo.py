#!/usr/bin/env python3
"""Demo script summarizing source files with the chat completion augmentor.

Each file under src/ is passed as the input of a two-message conversation.
Works against OpenAI or any OpenAI-compatible server.

Run with: python examples/summarize_files_demo.py --files 3 --sdk openai_php
"""

import argparse
import random
from pathlib import Path

from augmentor_chatgpt import (
    AugmentorConfig,
    ChatGptAugmentor,
    ClientSettings,
    EnvKeyProvider,
)


def build_augmentor(url: str, model: str, sdk: str) -> ChatGptAugmentor:
    config = AugmentorConfig(
        sdk=sdk,
        model=model,
        messages=[
            {"role": "system", "content": "You are a concise code reviewer."},
            {
                "role": "user",
                "content": "Summarize what this file does in two sentences:\n\n{input}",
            },
        ],
        temperature=0.2,
        max_tokens=120,
        top_p=1,
        n=1,
        user_tracking=False,
        client=ClientSettings(base_url=url),
    )
    return ChatGptAugmentor(config=config, key_provider=EnvKeyProvider())


def run_demo(url: str, model: str, sdk: str, num_files: int) -> None:
    src_dir = Path(__file__).parent.parent / "src"
    files = sorted(src_dir.rglob("*.py"))
    selected = random.sample(files, min(num_files, len(files)))

    augmentor = build_augmentor(url, model, sdk)
    print(f"Using {augmentor.get_client().sdk.value} client against {url}\n")

    try:
        for path in selected:
            result = augmentor.execute(path.read_text(encoding="utf-8")[:4000])
            print(f"=== {path.relative_to(src_dir)} ===")
            if "_errors" in result:
                print(f"  {result['_errors']}\n")
                continue
            for text in result["default"]:
                print(f"  {text}\n")
    finally:
        augmentor.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Source file summary demo")
    parser.add_argument(
        "--url",
        default="https://api.openai.com/v1",
        help="API base URL",
    )
    parser.add_argument(
        "--model",
        default="gpt-3.5-turbo",
        help="Model name",
    )
    parser.add_argument(
        "--sdk",
        choices=["orhanerday", "openai_php"],
        default="orhanerday",
        help="Client implementation to use",
    )
    parser.add_argument(
        "--files",
        type=int,
        default=3,
        help="Number of files to summarize",
    )
    args = parser.parse_args()

    run_demo(args.url, args.model, args.sdk, args.files)


if __name__ == "__main__":
    main()
