# ABOUTME: A small bundled reading history used by the --sample CLI flag and the tests.
# ABOUTME: Mixes read, currently-reading, and to-read rows across several eras.

SAMPLE_CSV = """\
Title,Author,Genre,Year Published,Pages,Date Started,Date Finished,Rating,Average Rating,ISBN,Status
Project Hail Mary,Andy Weir,Science Fiction,2021,496,2025/01/03,2025/01/12,5,4.35,9780593135204,read
Kindred,Octavia E. Butler,Science Fiction,1979,264,2025/01/15,2025/01/22,5,4.25,9780807083697,read
The Midnight Library,Matt Haig,Fiction,2020,304,2025/01/25,2025/02/01,4,3.85,9780525559474,read
Educated,Tara Westover,Memoir,2018,352,2025/02/03,2025/02/12,4,4.15,9780399590504,read
Atomic Habits,James Clear,Self Help,2018,320,2025/02/15,2025/02/22,4,4.35,9780735211292,read
The Handmaid's Tale,Margaret Atwood,Dystopian,1985,311,2025/03/01,2025/03/08,5,4.15,9780385490818,read
Becoming,Michelle Obama,Memoir,2018,426,2025/03/10,2025/03/18,4,4.45,9781524763138,read
Circe,Madeline Miller,Fantasy,2018,393,2025/03/20,2025/03/30,5,4.25,9780316334756,read
The Pragmatic Programmer,Andrew Hunt,Technology,1999,352,2025/04/01,2025/04/12,4,4.35,9780201616224,read
Dune,Frank Herbert,Science Fiction,1965,412,2025/04/05,2025/04/15,5,4.25,9780441172719,read
Deep Work,Cal Newport,Productivity,2016,296,2025/04/15,,0,4.15,9781455586691,currently-reading
The Vanishing Half,Brit Bennett,Fiction,2020,343,2025/04/18,,0,4.05,9780525536291,currently-reading
Sapiens,Yuval Noah Harari,History,2011,443,2024/05/01,2024/05/15,4,4.35,9780062316097,read
The Power,Naomi Alderman,Science Fiction,2016,386,2021/03/14,,0,3.85,9780316547613,to-read
The Fifth Season,N.K. Jemisin,Fantasy,2015,512,2023/08/02,,0,4.25,9780316229296,to-read
Lean In,Sheryl Sandberg,Business,2013,240,2025/06/20,,0,3.75,9780385349949,to-read
Thinking Fast and Slow,Daniel Kahneman,Psychology,2011,499,2024/05/20,2024/06/10,4,4.05,9780374275631,read
The Martian,Andy Weir,Science Fiction,2014,369,2024/06/01,2024/06/15,5,4.35,9780804139021,read
Gone Girl,Gillian Flynn,Thriller,2012,432,2019/11/30,,0,3.95,9780307588371,to-read
Station Eleven,Emily St. John Mandel,Fiction,2014,333,2024/06/20,2024/07/05,4,3.95,9780385353305,read
"""
