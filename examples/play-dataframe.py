import sys

from berkelium import DataFrame

df = DataFrame.open_csv(sys.argv[1] if len(sys.argv) > 1 else "test/data/sample_data.csv")

print(df, df.dtypes)
print("Rows with missing values:", df.is_null().filter(lambda row, label: any(row.values())).index)

clean = df.dropna()
for city, people in clean.group_by("City").items():
    print(city, people.count("Name"), people.mean("Monthly Income"))

print(clean.sort_values("Monthly Income", ascending=False).head(3).to_records())
print(df.describe())
