from datetime import datetime, timezone

import pytest


ADD_ONLY_PATCH = """@@ -0,0 +1,5 @@
+function newFunction() {
+  console.log("This is new code");
+  return true;
+}
+"""

REPLACE_PATCH = """@@ -10,3 +10,4 @@ function oldFunction() {
-  const oldVar = 10;
-  return oldVar;
+  const newVar = 20;
+  console.log("Modified");
+  return newVar;
 }"""

DELETE_ONLY_PATCH = """@@ -15,5 +15,2 @@ function cleanup() {
-  // Old comment
-  const unused = 5;
-  console.log("deprecated");
   return;
 }"""

BLANK_LINES_REMOVED_PATCH = """@@ -20,4 +20,3 @@ function compact() {
-
-
   const value = 10;
+  const newValue = 20;
   return value;
 }"""

BLANK_LINES_ADDED_PATCH = """@@ -30,2 +30,5 @@ function spacing() {
   const a = 1;
+
+
   const b = 2;
 }"""

MIXED_HUNKS_PATCH = """@@ -1,0 +2,3 @@ class MyClass {
+  constructor() {
+    this.value = 0;
+  }
@@ -10,2 +13,2 @@ class MyClass {
-  oldMethod() {
+  newMethod() {
     return this.value;
@@ -20,0 +23,5 @@ class MyClass {
+
+  anotherNewMethod() {
+    return this.value * 2;
+  }
 }"""

FORMATTING_PATCH = """@@ -5,3 +5,3 @@ const config = {
-  option1: true,
-  option2: false,
-  option3: "value"
+  option1: true,
+  option2: false,
+  option3: "value",
 };"""

WHITESPACE_ONLY_PATCH = """@@ -10,2 +10,2 @@ function test() {
-
-
+
+
   return true;
 }"""


@pytest.fixture
def patches():
    return {
        "add_only": ADD_ONLY_PATCH,
        "replace": REPLACE_PATCH,
        "delete_only": DELETE_ONLY_PATCH,
        "blank_lines_removed": BLANK_LINES_REMOVED_PATCH,
        "blank_lines_added": BLANK_LINES_ADDED_PATCH,
        "mixed_hunks": MIXED_HUNKS_PATCH,
        "formatting": FORMATTING_PATCH,
        "whitespace_only": WHITESPACE_ONLY_PATCH,
    }


@pytest.fixture
def current_date():
    """Timestamp of the change under review."""
    return datetime(2024, 12, 1, tzinfo=timezone.utc)


def _blame_range(
    start=1,
    end=20,
    author="Alice",
    date="2024-11-25T00:00:00Z",
    oid="abc1234def",
):
    """Build a raw blame range the way the blame query returns it."""
    return {
        "startingLine": start,
        "endingLine": end,
        "commit": {
            "oid": oid,
            "committedDate": date,
            "author": {"name": author, "email": f"{author}@example.com"},
        },
    }


@pytest.fixture
def make_blame_range():
    return _blame_range
