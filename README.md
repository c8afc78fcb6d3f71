# numtoys

A collection of small number toys and clock printers. Each one is usable
both as a library function and as a console command.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

### Clocks

| Command     | Prints                                                   |
|-------------|----------------------------------------------------------|
| `epoch`     | current UNIX time in whole seconds                       |
| `hex-epoch` | current UNIX time in seconds, as hexadecimal (`0x...`)   |
| `neodate`   | local time as `YYYY-MM-DDTHH:MM:SS+zzzz`                 |
| `epoch-ns`  | current UNIX time with nine decimal places               |
| `epoch-us`  | current UNIX time rounded to six decimal places          |

### The number e

    e-normal 20          # e = e / i + 1 for i = 20 down to 1, one line per step
    e-pipeline 1000      # e = 2.xxxx... by fixed-point division over 1000 terms
    e-pipeline -1000     # the same, with the fraction's 64-bit words in hexadecimal
    e-pipeline 1000 8    # second argument: how many divisors to run per pass

`e-pipeline` sizes the fraction from Stirling's estimate of log2(terms!)
and reports that estimate, the word count and the digit count on standard
error.

`ecalc` is the full calculator with options:

    ecalc -t TERMS -i INTENSITY -T TILE --impl=legacy|mxi -o FILE -q

* `-t` number of terms (default 5)
* `-i` divisors per pass (default 1, at most the number of terms)
* `-T` words per tile in the decimal conversion (default 4096, must not be 0)
* `--impl` calculation core, `legacy` (plain big-integer division) or
  `mxi` (32-bit limbs with reciprocal division; default). With more than
  2**32 - 1 terms `mxi` falls back to `legacy`.
* `-o` write the digits to a file instead of standard output
* `-q` no progress reports
* `-h` usage text

Progress (once a second, unless `-q`) and diagnostics go to standard
error; the digits go to standard output or the chosen file, with a line
break after the first group of 19 digits and every fourth group after it.

### The number pi

    pi-integrate 100000  # pi from the area under a quarter circle of radius 100000
    pi-fast              # pi as acos(-1) at 65536 bits of precision

Both print pi with 128 decimal places on standard error.

### Other toys

    ackermann 2 3        # A(2, 3), the time taken and the number of calls made
    approx 0.3333 20     # walk mediants toward 0.3333 for up to 20 steps
    circle 20            # draw a filled circle of radius 20, estimate pi on stderr
    logfactorial 100     # log2(100!) by summing logarithms
    notfib               # endless four-column sequence, one row every 0.2 s
    prime 100            # every prime up to and including 100, one per line
    fastfib 1000         # F(1000) by fast doubling
    fastfib -1000        # F(1000) as raw bytes: 4-byte signed big-endian length, then magnitude
    simpleturtle < cmds  # run turtle commands read from standard input
    rand-blast out.bin 42   # write 1 MiB from a weak LCG seeded with 42
    rand-blast out.bin      # try all 2**32 seeds, print each one that reproduces out.bin
    rand-blast -            # the same, reading the data from standard input

`approx` takes a number no greater than 1. `notfib` runs until interrupted.

Turtle commands are single characters: `U` pen up, `D` pen down, `L` and
`R` turn left and right by 90 degrees, `M n` move `n` steps, `P` print the
81x81 plot, `?` print position and heading, `X` quit. Other characters
are ignored. Moving off the plot raises `ValueError`.

## Library use

    from numtoys.fastfib import fibonacci
    from numtoys.prime import primes_below
    from numtoys.ackermann import ackermann
    from numtoys.turtleplot import Turtle

    fibonacci(10)              # 55
    list(primes_below(20))     # [2, 3, 5, 7, 11, 13, 17, 19]
    ackermann(2, 3).value      # 9; .calls holds the number of calls

    turtle = Turtle()
    turtle.pen_down()
    turtle.move(5)
    turtle.turn_left()
    turtle.move(3)
    print(turtle.status())
    print(turtle.render())

Other entry points:

* `numtoys.approx.mediant_steps` and `format_step`
* `numtoys.circle.circle_lines` and `estimate_pi`
* `numtoys.logfactorial.log2_factorial`
* `numtoys.notfib.notfib` and `format_row`
* `numtoys.fastfib.to_raw`
* `numtoys.pi.pi_by_integration`, `pi_by_acos` and `format_pi`
* `numtoys.randblast.weak_rand`, `generate`, `matches` and `crack`
* `numtoys.euler.series_steps`, `stirling_log2_factorial`,
  `decimal_digits`, `compute_fraction`, `fraction_groups` and `hex_words`
* `numtoys.ecalc.parse_args`, `compute_legacy`, `compute_mxi` and
  `write_fraction`
* `numtoys.clock.format_epoch`, `format_hex_epoch`, `format_neodate`,
  `format_ns` and `format_us`

## Limits

All calculations run on a single thread. `ecalc` and `e-pipeline` accept
an intensity, but it only changes how divisors are batched, not the
result or the number of threads used; `rand-blast` searches seeds one at
a time, so a full search of 2**32 seeds is slow.