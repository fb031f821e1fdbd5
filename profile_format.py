#!/usr/bin/env python3
"""Profile markupfmt to find performance bottlenecks."""

import cProfile
import io
import pstats

from markupfmt import format

# Sample markup
markup = """
<!DOCTYPE html>
<html>
<head><title>Test</title></head>
<body>
    <div class="container" id="main" data-role="page" :bound="value" @click="handle">
        <p>Paragraph one has enough words in it that it will need to wrap at least once when formatted.</p>
        <!-- a comment -->
        <MyComponent v-if="show" :items="items"/>
        <ul><li>One</li><li>Two</li><li>Three</li></ul>
        <p>Broken <b>bold</i> markup degrades to text.</p>
    </div>
</body>
</html>
""" * 100  # Repeat for more meaningful results

# Profile
pr = cProfile.Profile()
pr.enable()

for _ in range(10):
    result = format(markup)

pr.disable()

# Print stats
s = io.StringIO()
ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
ps.print_stats(50)  # Top 50 functions
print(s.getvalue())
