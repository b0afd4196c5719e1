import math

from cellframe import Table

table = Table.open_csv("data/shops.csv")
print(table.head(5))
print(table.shape())
print(table.dtypes())

print("--------------------")

numbers = Table(["a", "b", "c"], {"a": [1, 2, 3], "b": [4, 5, 6], "c": [7, 8, 9]})
print(numbers)
for name, description in numbers.describe().items():
    print(f"{name}: {description or 'No numeric data'}")
print("mean", numbers.mean())

print("--------------------")

incomplete = Table(
    ["a", "b", "c"],
    {"a": ["hello", math.nan, "pandas"], "b": [1, 2, math.nan], "c": [47, 3, 4]},
)
print("before dropna")
print(incomplete)
print("after dropna")
print(incomplete.drop_na())

filled = incomplete.copy()
filled.fill_na()
print("after fillna")
print(filled)

print("isna")
print(incomplete.is_na())

print("--------------------")

table.sort_values("Revenue")
print(table.tail(3))
print("sum", table.sum())
print("median", table.median())
for city, shops in table.group_by("City").items():
    print(city, "->", shops.mean()["Employees"])
