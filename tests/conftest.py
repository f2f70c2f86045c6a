from __future__ import annotations

import pytest

BICYCLE_MARKDOWN = """\
Creates a new bicycle with the provided parts and specifications.

- Remark: Satisfaction guaranteed!

The word *bicycle* first appeared in English print in 1868
to describe "Bysicles and trysicles" on the
"Champs Elysées and Bois de Boulogne".

The more common types of bicycles include:

- utility bicycles
- mountain bicycles
- racing bicycles
- touring bicycles
- hybrid bicycles
- cruiser bicycles

```swift
let bicycle = Bicycle(gearing: .fixed, handlebar: .drop, frameSize: 170)
```

- Author: Mattt
- Complexity: `O(1)`
- Parameter style: The style of the bicycle
- Parameters:
   - gearing: The gearing of the bicycle
   - handlebar: The handlebar of the bicycle
   - frameSize: The frame size of the bicycle, in centimeters
- Throws:
    - `Error.invalidSpecification` if something's wrong with the design
    - `Error.partOutOfStock` if a part needs to be ordered
- Returns: A beautiful, brand-new bicycle,
           custom-built just for you.
"""


@pytest.fixture
def bicycle_markdown() -> str:
    return BICYCLE_MARKDOWN
